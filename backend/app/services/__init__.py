# CMS Services
from app.services.article import ArticleService
from app.services.auth import AuthService
from app.services.contact import ContactService
from app.services.event import EventService
from app.services.event_registration import EventRegistrationService
from app.services.feedback import FeedbackService
from app.services.gallery import GalleryService
from app.services.project import ProjectService
from app.services.solution import SolutionService
from app.services.token_blacklist import TokenBlacklistService

__all__ = [
    "ArticleService",
    "AuthService",
    "ContactService",
    "EventRegistrationService",
    "EventService",
    "FeedbackService",
    "GalleryService",
    "ProjectService",
    "SolutionService",
    "TokenBlacklistService",
]
