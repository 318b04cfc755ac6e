from thesis_admin.models.role import Permission, Role, role_permissions  # noqa: F401
from thesis_admin.models.user import User  # noqa: F401
from thesis_admin.models.session import UserSession  # noqa: F401
from thesis_admin.models.thesis import Thesis, ThesisStatus  # noqa: F401
from thesis_admin.models.history import History  # noqa: F401
