"""Declarative UI descriptions returned alongside tool results."""
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UIModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CardUI(UIModel):
    type: Literal["card"] = "card"
    title: str
    content: str = ""


class TableColumn(UIModel):
    key: str
    header: str
    type: Literal["text", "number"] = "text"


class TableUI(UIModel):
    type: Literal["table"] = "table"
    columns: List[TableColumn]
    rows: List[Dict[str, Any]] = []


class FormField(UIModel):
    name: str
    label: str
    type: str = "string"
    widget: str = "text"
    required: bool = False


class FormSubmit(UIModel):
    tool: str


class FormUI(UIModel):
    type: Literal["form"] = "form"
    title: str
    description: str = ""
    render_mode: Literal["inline", "page"] = "inline"
    fields: List[FormField]
    on_submit: Optional[FormSubmit] = None


class ChartKeys(UIModel):
    x: str
    y: str


class ChartUI(UIModel):
    type: Literal["chart"] = "chart"
    chart_type: Literal["bar", "line", "area", "pie"] = "bar"
    title: str
    render_mode: Literal["inline", "page"] = "inline"
    data: List[Dict[str, Any]]
    data_keys: ChartKeys
    description: str = ""


UI = Union[CardUI, TableUI, FormUI, ChartUI]
