from fastapi import Request

from students_api.storage.base import IStudentStorage


def get_storage(request: Request) -> IStudentStorage:
    """
    Dependency returning the store created at startup.
    The same instance serves every request.
    """
    return request.app.state.storage
