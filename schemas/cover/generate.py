from pydantic import BaseModel, model_validator, Field, ConfigDict
from typing import List, Optional, Any
from utils.constants import *


# Define data models
class ConflictVertex(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    classId: str
    timeId: Optional[str] = None
    roomId: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def extract_classId(cls, values: Any) -> Any:
        """
        Model validator to accept the class id under other key spellings, e.g. "class_id", "class", "Class ID".

        If the "classId" key is not present, the first key containing the word "class" is moved to "classId".
        """
        if isinstance(values, dict) and "classId" not in values:
            for key in list(values.keys()):
                if "class" in key.lower():
                    values["classId"] = values.pop(key)
                    break
        return values


class ConflictEdge(BaseModel):
    model_config = ConfigDict(extra="allow")

    source: str
    target: str
    weight: float = Field(default=DEFAULT_EDGE_WEIGHT)


class CoverRequest(BaseModel):
    model_config = ConfigDict(extra="allow")

    graphType: str = "class_time"
    algorithms: Optional[List[str]] = None
    maxCycleLength: Optional[int] = Field(default=MAX_CYCLE_LENGTH, ge=3)
    maxCycleExpansions: Optional[int] = Field(default=MAX_CYCLE_EXPANSIONS, ge=1)
    allowPartialCycles: bool = False
    coverResidualEdges: bool = True

    @model_validator(mode="after")
    def validate_graph_type(self) -> "CoverRequest":
        if self.graphType not in GRAPH_TYPES:
            raise ValueError(
                f"Invalid graphType {self.graphType!r}. Expected one of {', '.join(GRAPH_TYPES)}."
            )
        return self
