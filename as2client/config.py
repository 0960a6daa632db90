from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .constants import DEFAULT_MDN_OPTIONS, DEFAULT_MESSAGE_ID_FORMAT, DEFAULT_SEND_TIMEOUT
from .serializer import MIC_ALGORITHMS


class ClientSettings(BaseModel):
    """Static connection settings for one trading partner exchange."""

    model_config = ConfigDict(frozen=True)

    sender_as2_id: str
    sender_key_alias: str
    sender_email: str
    receiver_as2_id: str
    receiver_key_alias: str
    destination_url: str
    sign_algorithm: Optional[str] = None
    encrypt_algorithm: Optional[str] = None
    mdn_options: str = DEFAULT_MDN_OPTIONS
    message_id_format: str = DEFAULT_MESSAGE_ID_FORMAT
    key_store_path: Path
    key_store_password: str = Field(default="", repr=False)
    partnership_name: str = ""

    @field_validator("message_id_format")
    @classmethod
    def _require_unique_part(cls, value: str) -> str:
        if "{uuid}" not in value:
            raise ValueError("message_id_format must contain the {uuid} placeholder")
        return value

    @field_validator("sign_algorithm")
    @classmethod
    def _require_known_digest(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and value.lower() not in MIC_ALGORITHMS:
            raise ValueError(f"Unsupported sign_algorithm: {value}")
        return value

    @model_validator(mode="before")
    @classmethod
    def _default_partnership_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("partnership_name"):
            sender = data.get("sender_as2_id")
            receiver = data.get("receiver_as2_id")
            data = {**data, "partnership_name": f"{sender}-{receiver}"}
        return data


class SenderConfig(BaseModel):
    """Transmission engine settings."""

    backend: Literal["http", "loopback"] = "http"
    timeout: float = DEFAULT_SEND_TIMEOUT


class ClientConfig(BaseModel):
    """Top-level configuration model."""

    settings: Optional[ClientSettings] = None
    sender: SenderConfig = SenderConfig()


def load_config(path: Optional[str] = None) -> ClientConfig:
    """Load configuration from YAML file.

    Args:
        path: Optional path to config file. Falls back to AS2CLIENT_CONFIG env
            variable or 'as2client.yaml' in the current directory.
    """

    config_path = path or os.getenv("AS2CLIENT_CONFIG", "as2client.yaml")
    data: dict = {}
    if os.path.exists(config_path):
        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

    env_password = os.getenv("AS2CLIENT_KEYSTORE_PASSWORD")
    if env_password is not None and data.get("settings"):
        data["settings"]["key_store_password"] = env_password
    return ClientConfig(**data)
