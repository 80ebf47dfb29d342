"""Models for component specifications (one per node operation)."""

from typing import Any

from pydantic import BaseModel, Field


class ParameterData(BaseModel):
    """`data` block of a parameter hint."""
    required: bool = False
    # Key under component_parameters holding this parameter's value
    storage_key: str | None = None


class ParameterInfo(BaseModel):
    """UI hint for a single parameter."""
    parameter_ref: str
    control: str | None = None
    custom_control_id: str | None = None
    label: Any = None
    description: Any = None
    data: ParameterData = Field(default_factory=ParameterData)

    @property
    def display_label(self) -> str:
        if isinstance(self.label, str) and self.label:
            return self.label
        if isinstance(self.label, dict) and isinstance(self.label.get("default"), str):
            return self.label["default"]
        return self.parameter_ref


class GroupInfo(BaseModel):
    """Panel and grouping metadata. Not used for validation."""
    id: str | None = None
    type: str | None = None
    parameter_refs: list[str] = Field(default_factory=list)
    group_info: list["GroupInfo"] = Field(default_factory=list)


class UiHints(BaseModel):
    parameter_info: list[ParameterInfo] = Field(default_factory=list)
    group_info: list[GroupInfo] = Field(default_factory=list)


class ParameterDeclaration(BaseModel):
    id: str


class SpecProperties(BaseModel):
    """Parameter declarations, defaults and UI hints of a component."""
    current_parameters: dict[str, Any] = Field(default_factory=dict)
    parameters: list[ParameterDeclaration] = Field(default_factory=list)
    uihints: UiHints = Field(default_factory=UiHints)


class SpecAppData(BaseModel):
    properties: SpecProperties = Field(default_factory=SpecProperties)


class ComponentSpec(BaseModel):
    """Specification of one node operation, keyed by `op`."""
    op: str
    label: Any = None
    description: Any = None
    app_data: SpecAppData = Field(default_factory=SpecAppData)

    @property
    def properties(self) -> SpecProperties:
        return self.app_data.properties

    def get_parameter_info(self, parameter_id: str) -> ParameterInfo | None:
        """Find the UI hint for a parameter id."""
        for info in self.properties.uihints.parameter_info:
            if info.parameter_ref == parameter_id:
                return info
        return None
