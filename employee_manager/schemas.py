from datetime import datetime
from typing import Annotated, Optional
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, field_validator
from pydantic.alias_generators import to_camel

# Upper bound is the INT primary key range
RowId = Annotated[StrictInt, Field(ge=1, le=2**31 - 1)]
NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
PositiveNumber = Annotated[float, Field(gt=0, strict=True, allow_inf_nan=False)]


def _bare_email(v: str) -> str:
    """Checks the address but keeps it exactly as submitted."""
    try:
        validate_email(v, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from None
    return v


Email = Annotated[StrictStr, AfterValidator(_bare_email)]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeCreate(CamelModel):
    first_name: NonEmptyStr = Field(max_length=80)
    last_name:  NonEmptyStr = Field(max_length=80)
    email:      Email
    phone:      Optional[StrictStr] = Field(default=None, max_length=40)
    department: NonEmptyStr = Field(max_length=120)
    position:   NonEmptyStr = Field(max_length=120)
    salary:     PositiveNumber


class EmployeeUpdate(CamelModel):
    id:         RowId
    first_name: Optional[NonEmptyStr] = Field(default=None, max_length=80)
    last_name:  Optional[NonEmptyStr] = Field(default=None, max_length=80)
    email:      Optional[Email] = None
    phone:      Optional[StrictStr] = Field(default=None, max_length=40)
    department: Optional[NonEmptyStr] = Field(default=None, max_length=120)
    position:   Optional[NonEmptyStr] = Field(default=None, max_length=120)
    salary:     Optional[PositiveNumber] = None
    is_active:  Optional[StrictBool] = None

    # Omitted means "leave alone"; an explicit null would blank a required column.
    @field_validator("first_name", "last_name", "email", "department",
                     "position", "salary", "is_active")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v

    def changes(self) -> dict:
        """Fields present in the payload, keyed by column name."""
        return self.model_dump(exclude_unset=True, exclude={"id"})


class EmployeeId(CamelModel):
    id: RowId


class SearchQuery(CamelModel):
    query: StrictStr


class Employee(CamelModel):
    """Employee record as returned by every procedure and read by the client."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: Optional[str] = None
    department: str
    position: str
    salary: float
    hire_date: datetime
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
