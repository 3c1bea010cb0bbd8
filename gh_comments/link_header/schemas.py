from pydantic import BaseModel, ConfigDict


class LinkEntry(BaseModel):
    relation: str
    url: str
    page: int


class LinkParseError(Exception):
    def __init__(self, entry: str, reason: str):
        self.entry = entry
        self.reason = reason
        super().__init__(f"Malformed link entry '{entry}': {reason}")


class LinkParseResult(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    entry: LinkEntry | None = None
    error: LinkParseError | None = None

    @property
    def ok(self) -> bool:
        return self.entry is not None
