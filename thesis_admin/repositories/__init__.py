from thesis_admin.repositories.thesis_repo import ThesisRepository
from thesis_admin.repositories.user_repo import UserRepository
from thesis_admin.repositories.history_repo import HistoryRepository
from thesis_admin.repositories.session_repo import SessionRepository

__all__ = [
    "ThesisRepository",
    "UserRepository",
    "HistoryRepository",
    "SessionRepository",
]
