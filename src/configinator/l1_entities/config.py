"""Lift configuration model — the parsed contents of a project's config file."""

from __future__ import annotations

from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

U32_MAX = 2**32 - 1

AndroidVersion = Annotated[int, Field(ge=0, le=U32_MAX)]


# Unicode White_Space; narrower than str.isspace(), which also covers \x1c-\x1f.
WHITESPACE = (
    '\t\n\x0b\x0c\r \x85\xa0\u1680'
    '\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a'
    '\u2028\u2029\u202f\u205f\u3000'
)


def trim_ignore_files(text: str) -> str:
    """Strip every line, drop blank ones, and rejoin with a single newline.

    Lines are split on newlines only; a trailing carriage return is removed by the strip.
    """
    lines = (line.strip(WHITESPACE) for line in text.split('\n'))
    return '\n'.join(line for line in lines if line)


class LiftConfig(BaseModel):
    """Configuration from the Lift configuration reference.

    Every field is optional: a key missing from the file stays ``None``,
    while an empty list in the file stays ``[]``.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra='ignore')

    setup: str | None = None
    build: str | None = None
    important_rules: list[str] | None = Field(default=None, alias='importantRules')
    ignore_rules: list[str] | None = Field(default=None, alias='ignoreRules')
    ignore_files: str | None = Field(default=None, alias='ignoreFiles')
    tools: list[str] | None = None
    disable_tools: list[str] | None = Field(default=None, alias='disableTools')
    custom_tools: list[str] | None = Field(default=None, alias='customTools')
    allow: list[str] | None = None
    jdk_11: bool | None = Field(default=None, alias='jdk11')
    android_version: AndroidVersion | None = Field(default=None, alias='androidVersion')
    errorprone_bug_patterns: list[str] | None = Field(
        default=None,
        alias='errorproneBugPatterns',
        validation_alias=AliasChoices('errorproneBugPatterns', 'errorprone_bug_patterns'),
    )
    summary_comments: bool | None = Field(default=None, alias='summaryComments')

    @field_validator('ignore_files')
    @classmethod
    def _trim_ignore_files(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return trim_ignore_files(value)
