"""Pydantic response models for the FastAPI endpoints.

Keep transport concerns (validation, docs) here and keep business/domain
types in `models.domain_models`.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StatsSummary(BaseModel):
	started: int = Field(default=0, ge=0)
	completed: int = Field(default=0, ge=0)
	seconds: float = Field(default=0, ge=0)


class PageData(BaseModel):
	stats: StatsSummary
	show_tutorial: bool


class ThemeColors(BaseModel):
	model_config = ConfigDict(frozen=True)

	# each value is an "R G B" triple, e.g. "25 25 25"
	bg: str
	main: str
	sub: str
	text: str
	error: str


class Theme(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str
	label: str
	colors: ThemeColors


__all__ = [
	"StatsSummary",
	"PageData",
	"ThemeColors",
	"Theme",
]
