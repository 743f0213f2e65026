"""CMS API Router - aggregates all resource routes."""

from fastapi import APIRouter

from app.api import (
    articles,
    auth,
    contacts,
    event_registrations,
    events,
    feedback,
    gallery,
    projects,
    solutions,
)

# Resource routers are mounted at the root, each under its own prefix
api_router = APIRouter()

api_router.include_router(auth.router)
api_router.include_router(contacts.router)
api_router.include_router(feedback.router)
api_router.include_router(articles.router)
api_router.include_router(events.router)
api_router.include_router(event_registrations.router)
api_router.include_router(projects.router)
api_router.include_router(solutions.router)
api_router.include_router(gallery.router)
