"""Data models and schemas.

Defines the data structures used throughout the package:
- Point / Ring: WGS 84 geometric primitives
- OwnerRef, LandParcel, ParcelDraft: parcel records and import drafts
- SkippedItem: per-item failure report for batch operations
- ParcelRecord, DraftRecord: validated camelCase boundary records
"""
