"""Pydantic models describing storage and inventory request payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StorageBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class IdentifierPayload(StorageBaseModel):
    value: str
    identifier_type_id: str | None = Field(default=None, alias="identifierTypeId")


class InstanceRelationshipPayload(StorageBaseModel):
    id: str
    super_instance_id: str = Field(alias="superInstanceId")
    sub_instance_id: str = Field(alias="subInstanceId")
    instance_relationship_type_id: str | None = Field(
        default=None, alias="instanceRelationshipTypeId"
    )


class PrecedingSucceedingTitlePayload(StorageBaseModel):
    id: str
    preceding_instance_id: str | None = Field(default=None, alias="precedingInstanceId")
    succeeding_instance_id: str | None = Field(default=None, alias="succeedingInstanceId")
    title: str | None = None
    hrid: str | None = None
    identifiers: list[IdentifierPayload] = Field(default_factory=list)


class InstanceRelationshipCollection(StorageBaseModel):
    instance_relationships: list[InstanceRelationshipPayload] = Field(
        default_factory=list, alias="instanceRelationships"
    )
    total_records: int | None = Field(default=None, alias="totalRecords")


class PrecedingSucceedingTitleCollection(StorageBaseModel):
    preceding_succeeding_titles: list[PrecedingSucceedingTitlePayload] = Field(
        default_factory=list, alias="precedingSucceedingTitles"
    )
    total_records: int | None = Field(default=None, alias="totalRecords")


# Inbound instance request: only the related-record arrays are modelled.


class ParentInstancePayload(StorageBaseModel):
    id: str | None = None
    super_instance_id: str = Field(alias="superInstanceId")
    instance_relationship_type_id: str | None = Field(
        default=None, alias="instanceRelationshipTypeId"
    )


class ChildInstancePayload(StorageBaseModel):
    id: str | None = None
    sub_instance_id: str = Field(alias="subInstanceId")
    instance_relationship_type_id: str | None = Field(
        default=None, alias="instanceRelationshipTypeId"
    )


class PrecedingTitlePayload(StorageBaseModel):
    id: str | None = None
    preceding_instance_id: str | None = Field(default=None, alias="precedingInstanceId")
    title: str | None = None
    hrid: str | None = None
    identifiers: list[IdentifierPayload] = Field(default_factory=list)


class SucceedingTitlePayload(StorageBaseModel):
    id: str | None = None
    succeeding_instance_id: str | None = Field(default=None, alias="succeedingInstanceId")
    title: str | None = None
    hrid: str | None = None
    identifiers: list[IdentifierPayload] = Field(default_factory=list)


class InstanceRequest(StorageBaseModel):
    id: str
    parent_instances: list[ParentInstancePayload] | None = Field(
        default=None, alias="parentInstances"
    )
    child_instances: list[ChildInstancePayload] | None = Field(
        default=None, alias="childInstances"
    )
    preceding_titles: list[PrecedingTitlePayload] | None = Field(
        default=None, alias="precedingTitles"
    )
    succeeding_titles: list[SucceedingTitlePayload] | None = Field(
        default=None, alias="succeedingTitles"
    )
