from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import date
from enum import Enum


class DuplicationStatus(str, Enum):
    duplicated = "duplicated"
    skipped = "skipped"
    failed = "failed"


class DuplicateMenuRequest(BaseModel):
    target_date: date
    target_menu_type_id: Optional[str] = None  # keeps the source type when omitted


class DuplicateMenuTypeRequest(BaseModel):
    source_menu_type_id: str
    target_menu_type_id: str
    year: int
    month: int = Field(ge=1, le=12)


class DuplicationOutcome(BaseModel):
    """Result for one source menu of a batch duplication"""
    menu_date: date
    source_menu_id: str
    status: DuplicationStatus
    new_menu_id: Optional[str] = None
    message: Optional[str] = None


class DuplicationReport(BaseModel):
    duplicated_count: int = 0
    skipped_count: int = 0
    failed_count: int = 0
    outcomes: List[DuplicationOutcome] = []

    @classmethod
    def from_outcomes(cls, outcomes: List[DuplicationOutcome]) -> "DuplicationReport":
        return cls(
            duplicated_count=sum(1 for o in outcomes if o.status == DuplicationStatus.duplicated),
            skipped_count=sum(1 for o in outcomes if o.status == DuplicationStatus.skipped),
            failed_count=sum(1 for o in outcomes if o.status == DuplicationStatus.failed),
            outcomes=outcomes,
        )
