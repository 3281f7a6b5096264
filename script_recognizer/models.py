from typing import Optional

from pydantic import BaseModel, Field


class StructuredLocale(BaseModel):
    """A locale split into its subtags.

    ``None`` means the subtag is absent, which is not the same as ``''``.
    Instances are frozen, so they compare and hash by the whole
    (language, script, region) triple and can key a dict.
    """
    model_config = {"frozen": True}

    language: str = Field(min_length=1)  # 语言 eg. zh
    script: Optional[str] = None  # 书写系统 eg. Hant
    region: Optional[str] = None  # 地区 eg. TW

    @property
    def script_key(self) -> "StructuredLocale":
        """The (language, script) form used to look up the mapping table.

        Always a plain :class:`StructuredLocale`, even for subclasses.
        """
        return StructuredLocale(language=self.language, script=self.script)

    @property
    def table_key(self) -> "StructuredLocale":
        """A plain :class:`StructuredLocale` with the same three fields."""
        if type(self) is StructuredLocale:
            return self
        return StructuredLocale(language=self.language, script=self.script, region=self.region)

    @property
    def is_script_key(self) -> bool:
        return self.script is not None and self.region is None

    def __str__(self):
        return "_".join(
            part for part in (self.language, self.script, self.region) if part is not None
        )
