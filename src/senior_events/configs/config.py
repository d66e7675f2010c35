"""Configuration loader for the events catalog surface."""

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, model_validator

from senior_events.configs.settings import get_settings


class RegionConfig(BaseModel):
    """Where a region's events live in the document and on the surface."""

    document_key: str
    grid_id: str


class TrendsConfig(BaseModel):
    """Trends panel configuration."""

    document_key: str = "tendencias_2025_2026"
    container_id: str = "trends-container"
    titles: Dict[str, str] = Field(default_factory=dict)


class ModalConfig(BaseModel):
    """Detail modal element ids."""

    modal_id: str = "event-modal"
    dismiss_id: str = "modal-close"


class CollapsibleConfig(BaseModel):
    """Header icons for collapsible panels."""

    open_icon: str = "−"
    closed_icon: str = "+"


class UIConfig(BaseModel):
    """
    Validated surface layout.

    Section ids are also the location hash values the router reads and writes.
    """

    default_section: str = "home"
    sections: List[str]
    regions: Dict[str, RegionConfig]
    trends: TrendsConfig = Field(default_factory=TrendsConfig)
    modal: ModalConfig = Field(default_factory=ModalConfig)
    collapsible: CollapsibleConfig = Field(default_factory=CollapsibleConfig)
    loading_id: str = "loading"

    @model_validator(mode="after")
    def validate_default_section(self) -> "UIConfig":
        """Ensure the default section is one of the declared sections."""
        if self.default_section not in self.sections:
            raise ValueError(
                f"default_section '{self.default_section}' is not one of {self.sections}"
            )
        return self


class Config:
    """Configuration for the events catalog."""

    @classmethod
    @lru_cache
    def load_ui_config(cls, path: Optional[Path] = None) -> UIConfig:
        """
        Load and validate the YAML surface configuration.

        Args:
            path: Optional override; defaults to ``Settings.UI_CONFIG_PATH``

        Returns:
            Validated UIConfig

        Raises:
            FileNotFoundError: If the YAML file does not exist
        """
        config_path = Path(path) if path else get_settings().UI_CONFIG_PATH
        if not config_path.exists():
            raise FileNotFoundError(f"Missing config at {config_path}")

        with open(config_path, encoding="utf-8") as f:
            content = yaml.safe_load(f) or {}

        return UIConfig.model_validate(content)
