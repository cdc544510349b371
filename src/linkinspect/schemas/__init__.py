"""Module containing the schemas for the linkinspect package."""

from linkinspect.schemas.entry import EntryType, StatRecord

__all__ = ["EntryType", "StatRecord"]
