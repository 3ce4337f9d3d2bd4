from pydantic import BaseModel, Field, field_validator
from typing import Literal

from latex2doc.converter.models import ConversionOptions


class LLMSettings(BaseModel):
    provider: Literal["google"] = "google"
    model: str = "gemini-3-pro-preview"
    api_key_env: str = "API_KEY"
    max_tokens: int = Field(default=32768, gt=0)
    temperature: float = Field(default=0.2, ge=0)
    # seconds; None leaves the model call without a deadline
    timeout: float | None = Field(default=300, gt=0)


class UploadConfig(BaseModel):
    extensions: list[str] = Field(default_factory=lambda: [".tex"])
    max_file_size_mb: int = Field(default=5, gt=0)
    encoding: str = "utf-8"

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("at least one source extension is required")
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


class ExportConfig(BaseModel):
    output_dir: str = "."
    extension: str = ".doc"
    fallback_name: str = "converted-document"


class Latex2DocConfig(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    options: ConversionOptions = Field(default_factory=ConversionOptions)
    export: ExportConfig = Field(default_factory=ExportConfig)
    log_level: Literal["debug", "info", "warn", "error"] = "info"
    log_format: Literal["text", "json"] = "text"
