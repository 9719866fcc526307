"""
Translate service write results into HTTP responses.
"""

from fastapi import HTTPException

from budgetly.services.results import ErrorKind, WriteResult

ERROR_STATUS = {
    ErrorKind.unauthenticated: 401,
    ErrorKind.not_found: 404,
    ErrorKind.conflict: 409,
    ErrorKind.validation_failed: 422,
    ErrorKind.store_failure: 500,
}


def unwrap(result: WriteResult):
    """Return the result payload, or raise an HTTPException carrying kind and detail."""
    if result.error is not None:
        raise HTTPException(
            status_code=ERROR_STATUS[result.error.kind],
            detail=result.error.model_dump(mode="json"),
        )
    return result.data
