# Copyright 2025 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import os
from typing import NamedTuple, Optional

from read_primitives.conf.settings import ReaderSettings
from read_primitives.utils.yaml import model_from_yaml

CONFIG_YAML_ENV_VAR = 'READ_PRIMITIVES_CONFIG_YAML'


class _SettingsMetadata(NamedTuple):
    source: Optional[str]
    settings: ReaderSettings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> ReaderSettings:
    """ Return the reader settings.
        Get the file from environment variable 'READ_PRIMITIVES_CONFIG_YAML'
        If not set we return the default settings
    """
    settings_yaml_filepath = os.environ.get(CONFIG_YAML_ENV_VAR)
    return _load_settings_singleton(settings_yaml_filepath)


def _load_settings_singleton(source: Optional[str]) -> ReaderSettings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    settings = ReaderSettings() if source is None else model_from_yaml(ReaderSettings, filepath=source)
    _settings_singleton = _SettingsMetadata(source=source, settings=settings)

    return _settings_singleton.settings
