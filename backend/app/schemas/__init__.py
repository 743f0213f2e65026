# CMS Pydantic Schemas
from app.schemas.article import ArticleCreate, ArticleResponse, ArticleUpdate
from app.schemas.auth import AdminCreateRequest, AdminResponse, LoginRequest, LoginResponse
from app.schemas.common import CountResponse, MessageResponse, StatBucket
from app.schemas.contact import ContactCreate, ContactResponse, ContactUpdate
from app.schemas.event import EventCreate, EventResponse, EventUpdate
from app.schemas.event_registration import (
    RegistrationCreate,
    RegistrationResponse,
    RegistrationUpdate,
)
from app.schemas.feedback import FeedbackCreate, FeedbackResponse, FeedbackUpdate
from app.schemas.gallery import GalleryCreate, GalleryResponse, GalleryUpdate
from app.schemas.project import ProjectCreate, ProjectResponse, ProjectUpdate, VisibilityUpdate
from app.schemas.solution import SolutionCreate, SolutionResponse, SolutionUpdate

__all__ = [
    "AdminCreateRequest",
    "AdminResponse",
    "ArticleCreate",
    "ArticleResponse",
    "ArticleUpdate",
    "ContactCreate",
    "ContactResponse",
    "ContactUpdate",
    "CountResponse",
    "EventCreate",
    "EventResponse",
    "EventUpdate",
    "FeedbackCreate",
    "FeedbackResponse",
    "FeedbackUpdate",
    "GalleryCreate",
    "GalleryResponse",
    "GalleryUpdate",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "ProjectCreate",
    "ProjectResponse",
    "ProjectUpdate",
    "RegistrationCreate",
    "RegistrationResponse",
    "RegistrationUpdate",
    "SolutionCreate",
    "SolutionResponse",
    "SolutionUpdate",
    "StatBucket",
    "VisibilityUpdate",
]
