"""Course router."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from unicredits.application.commands.academics import (
    CreateCourseCommand,
    DeleteCourseCommand,
    UpdateCourseCommand,
)
from unicredits.application.queries.academics import (
    GetCourseQuery,
    ListCoursesQuery,
)
from unicredits.presentation.api.dependencies import RepoFactory
from unicredits.presentation.api.schemas.courses import (
    CourseCreateRequest,
    CourseResponse,
    CourseUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()

CategoryFilter = Annotated[
    Optional[UUID],
    Query(description="Only courses in this category"),
]
StatusFilter = Annotated[
    Optional[str],
    Query(alias="status", description="PENDING, COMPLETED or PF"),
]


@router.get(
    "",
    summary="List courses",
    responses={
        200: {"description": "Courses, newest first"},
        400: {"description": "Unknown status filter"},
    },
)
async def list_courses(
    factory: RepoFactory,
    category_id: CategoryFilter = None,
    status_filter: StatusFilter = None,
) -> list[CourseResponse]:
    query = ListCoursesQuery.from_factory(factory)
    courses = await query.execute(category_id=category_id, status=status_filter)
    return [CourseResponse.model_validate(c) for c in courses]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create a course",
    responses={
        201: {"description": "Course created"},
        400: {"description": "Invalid field value or grade without completion"},
        404: {"description": "Category not found"},
    },
)
async def create_course(
    request: CourseCreateRequest,
    factory: RepoFactory,
) -> CourseResponse:
    command = CreateCourseCommand.from_factory(factory)
    try:
        course = await command.execute(
            name=request.name,
            credits=request.credits,
            category_id=request.category_id,
            status=request.status,
            grade=request.grade,
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CourseResponse.model_validate(course)


@router.get(
    "/{course_id}",
    summary="Get a course",
    responses={
        200: {"description": "Course details"},
        404: {"description": "Course not found"},
    },
)
async def get_course(course_id: UUID, factory: RepoFactory) -> CourseResponse:
    query = GetCourseQuery.from_factory(factory)
    course = await query.execute(course_id)
    return CourseResponse.model_validate(course)


@router.patch(
    "/{course_id}",
    summary="Update a course",
    responses={
        200: {"description": "Course updated"},
        400: {"description": "Invalid field value or grade without completion"},
        404: {"description": "Course or target category not found"},
    },
)
async def update_course(
    course_id: UUID,
    request: CourseUpdateRequest,
    factory: RepoFactory,
) -> CourseResponse:
    """
    Apply the fields present in the body.

    Moving a course out of COMPLETED drops its grade and GPA score.
    """
    command = UpdateCourseCommand.from_factory(factory)
    try:
        course = await command.execute(
            course_id,
            **request.model_dump(exclude_unset=True),
        )
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise

    return CourseResponse.model_validate(course)


@router.delete(
    "/{course_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a course",
    responses={
        204: {"description": "Course deleted"},
        404: {"description": "Course not found"},
    },
)
async def delete_course(course_id: UUID, factory: RepoFactory) -> None:
    command = DeleteCourseCommand.from_factory(factory)
    try:
        await command.execute(course_id)
        await factory.session.commit()
    except Exception:
        await factory.session.rollback()
        raise
