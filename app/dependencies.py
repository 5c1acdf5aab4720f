from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.services.config_store import ConfigStore


def get_config_store(request: Request) -> ConfigStore:
    return request.app.state.config_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


ConfigStoreDep = Annotated[ConfigStore, Depends(get_config_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
