"""FastAPI dependencies shared by the routers."""

from fastapi import Header, HTTPException


def get_current_user_id(x_user_id: int | None = Header(default=None)) -> int:
    """
    Return the id of the authenticated caller.

    Authentication happens upstream; the gateway forwards the verified user
    id in the ``X-User-Id`` header.

    Raises:
        HTTPException 401: If the header is missing
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="authentication required")
    return x_user_id
