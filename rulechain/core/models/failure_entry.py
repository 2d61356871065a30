"""
Failure entry models stored in a FailureReport.
"""

from pydantic import BaseModel, ConfigDict


class AttributeFailure(BaseModel):
    """
    A failed validator bound to a single attribute.

    Attributes:
        validator: Short name of the validator that failed ("Presence")
        error_code: Specific failure code ("missing")
        message: Rendered error message ("must be provided")
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "validator": "Presence",
                "error_code": "missing",
                "message": "must be provided",
            }
        },
    )

    validator: str
    error_code: str | None = None
    message: str | None = None


class ModelFailure(BaseModel):
    """
    A failed validator bound to several attributes (e.g. ValueMatch).

    Attributes:
        validator: Short name of the validator that failed
        attributes: Attributes the validator was run against, in order
        error_code: Specific failure code
        message: Rendered error message
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "validator": "ValueMatch",
                "attributes": ["password", "password_confirm"],
                "error_code": "no_match",
                "message": "must be the same",
            }
        },
    )

    validator: str
    attributes: list[str]
    error_code: str | None = None
    message: str | None = None
