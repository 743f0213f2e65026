"""Multipart form parsing for endpoints that accept a file next to their fields."""

from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from starlette.datastructures import UploadFile

ModelT = TypeVar("ModelT", bound=BaseModel)


async def parse_multipart(
    request: Request,
    model: type[ModelT],
    file_field: str,
    list_fields: tuple[str, ...] = (),
) -> tuple[ModelT, UploadFile | None]:
    """Validate the text parts of a multipart body against ``model``.

    List fields are collected from repeated keys. An empty file part (a
    form submitted without choosing a file) counts as no file.

    Raises RequestValidationError so failures get the usual 422 body.
    """
    form = await request.form()

    upload = form.get(file_field)
    if not isinstance(upload, UploadFile) or not upload.filename:
        upload = None

    data: dict[str, object] = {}
    for key in form.keys():
        if key == file_field:
            continue
        if key in list_fields:
            data[key] = [v for v in form.getlist(key) if isinstance(v, str) and v.strip()]
        else:
            value = form.get(key)
            if isinstance(value, str):
                data[key] = value

    try:
        parsed = model.model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e
    return parsed, upload
