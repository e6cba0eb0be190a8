"""Customer wire and view schemas."""

from __future__ import annotations

import datetime as dt
from typing import List

from pydantic import BaseModel, Field, TypeAdapter, model_validator


class VisitRecord(BaseModel):
    date: dt.date
    count: int = Field(ge=1)


class CustomerRecord(BaseModel):
    id: str = Field(min_length=1)
    name: str
    location: str
    visits: List[VisitRecord] = Field(default_factory=list)
    createdAt: dt.datetime

    @model_validator(mode="after")
    def _unique_visit_dates(self) -> "CustomerRecord":
        seen: set[dt.date] = set()
        for visit in self.visits:
            if visit.date in seen:
                raise ValueError(f"Duplicate visit date {visit.date.isoformat()} for customer {self.id}")
            seen.add(visit.date)
        return self


class UserProfileRecord(BaseModel):
    id: str
    name: str
    email: str
    avatar: str
    provider: str


class CustomerStatsModel(BaseModel):
    totalVisits: int
    totalDays: int
    todayVisit: VisitRecord | None = None


class CustomerCardModel(BaseModel):
    id: str
    name: str
    location: str
    totalVisits: int
    totalDays: int
    todayCount: int | None = None
    todayLabel: str | None = None


class VisitHistoryEntryModel(BaseModel):
    date: dt.date
    label: str
    count: int
    countLabel: str
    isToday: bool


CustomerCollectionAdapter = TypeAdapter(List[CustomerRecord])
