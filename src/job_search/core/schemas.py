"""Pydantic schemas for validation and data transfer."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Company Schemas
# ============================================================================

class CompanyCreate(BaseModel):
    """Schema for adding a company."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1)


class CompanyRead(BaseModel):
    """Schema for reading a company."""
    id: int
    name: str

    model_config = {"from_attributes": True}


class CompanyItem(BaseModel):
    """Entry of the company selector."""
    id: int
    name: str

    def __str__(self) -> str:
        return self.name


class CompanyProjection(BaseModel):
    """Companies as shown in the table and in the selector."""
    rows: List[CompanyRead]
    lookup: List[CompanyItem]

    def find(self, name: str) -> Optional[CompanyItem]:
        """Find a selector entry by exact name."""
        return next((item for item in self.lookup if item.name == name), None)


# ============================================================================
# Status Schemas
# ============================================================================

class StatusRead(BaseModel):
    """Schema for reading a status."""
    id: int
    name: str

    model_config = {"from_attributes": True}

    def __str__(self) -> str:
        return self.name


# ============================================================================
# Role Schemas
# ============================================================================

class RoleCreate(BaseModel):
    """Schema for adding a role."""
    model_config = ConfigDict(str_strip_whitespace=True)

    company_id: int
    status_id: int
    role_name: str = Field(..., min_length=1)
    notes: str = ""


class RoleUpdate(BaseModel):
    """Schema for updating a role's status and notes."""
    model_config = ConfigDict(str_strip_whitespace=True)

    status_id: int
    notes: str = ""


class RoleRead(BaseModel):
    """A role joined with its company and status names."""
    id: int
    role_name: str
    company_id: int
    company_name: str
    status_id: int
    status_name: str
    notes: str = ""
    created_at: datetime
    modified_at: datetime


class RoleRow(RoleRead):
    """A role prepared for the roles table, with local display timestamps."""
    created: str
    modified: str
