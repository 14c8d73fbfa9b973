"""
Schedule endpoints.

CRUD operations for training schedules.  Payloads are validated before
the service is called; service errors are turned into responses by
``api.errors``.  The collection endpoint returns a bare JSON array.
"""

from typing import List

from fastapi import APIRouter, Response, status

from tsse_api.app.api.deps import PathId, ScheduleServiceDep
from tsse_api.app.api.errors import reject, respond
from tsse_api.app.schemas.schedule import Schedule, validate_schedule

router = APIRouter()


@router.post("", response_model=Schedule, status_code=status.HTTP_201_CREATED)
def create_schedule(schedule: Schedule, service: ScheduleServiceDep):
    """Create a schedule.

    Responds 400 when the name is empty or fewer than one training per
    week is planned, 409 when the id is already taken and 404 when a
    referenced workout does not exist.
    """
    violations = validate_schedule(schedule)
    if violations:
        return reject(violations)
    return respond(service.create(schedule))


@router.get("", response_model=List[Schedule])
def list_schedules(service: ScheduleServiceDep):
    """Return every schedule in storage order."""
    return respond(service.get_all())


@router.get("/{schedule_id}", response_model=Schedule)
def get_schedule(schedule_id: PathId, service: ScheduleServiceDep):
    """Retrieve a single schedule; 404 if it does not exist."""
    return respond(service.get_by_id(schedule_id))


@router.put("", response_model=Schedule)
def update_schedule(schedule: Schedule, service: ScheduleServiceDep):
    """Replace the schedule identified by the payload's ``id``."""
    violations = validate_schedule(schedule)
    if violations:
        return reject(violations)
    return respond(service.update(schedule))


@router.delete("/{schedule_id}", status_code=status.HTTP_200_OK, response_class=Response)
def delete_schedule(schedule_id: PathId, service: ScheduleServiceDep):
    """Delete a schedule.  Deleting an unknown id also succeeds."""
    result = service.delete_by_id(schedule_id)
    if not result.ok:
        return respond(result)
    return Response(status_code=status.HTTP_200_OK)
