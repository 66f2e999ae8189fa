"""
Pydantic schemas for customer operations.

Field names on the wire keep the casing the dashboard
already uses (CustID, CNIC, Gmail...), so the response
models carry aliases.
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class CustomerCreate(BaseModel):
    """
    Request to add a customer.

    name and cnic are optional here so that a missing value
    reaches the service and is rejected with a 400 and a
    readable message, not a schema error.
    """
    name: str | None = None
    cnic: str | None = None
    contact: str | None = None
    gmail: str | None = Field(
        default=None, validation_alias=AliasChoices("gmail", "Gmail")
    )


class CustomerCreated(BaseModel):
    success: bool = True
    customer_id: int = Field(alias="customerId")

    model_config = ConfigDict(populate_by_name=True)


class CustomerResponse(BaseModel):
    id: int = Field(alias="CustID")
    name: str = Field(alias="Name")
    cnic: str = Field(alias="CNIC")
    contact: str | None = Field(alias="Contact")
    gmail: str | None = Field(alias="Gmail")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
