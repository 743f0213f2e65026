# CMS Models
from app.models.admin_user import AdminUser
from app.models.article import Article
from app.models.base import BaseModel
from app.models.contact import Contact
from app.models.event import Event
from app.models.event_registration import EventRegistration
from app.models.feedback import Feedback
from app.models.gallery import GalleryItem
from app.models.showcase import Project, Solution
from app.models.token_blacklist import TokenBlacklist

__all__ = [
    "AdminUser",
    "Article",
    "BaseModel",
    "Contact",
    "Event",
    "EventRegistration",
    "Feedback",
    "GalleryItem",
    "Project",
    "Solution",
    "TokenBlacklist",
]
