# File: ConfigLoader.py
import yaml
from pathlib import Path
from typing import Optional, Union
from pydantic import ValidationError
from Configuration import AppSettings
import logging

logger = logging.getLogger(__name__)

class ConfigLoader:
    def __init__(self, defaults: Optional[AppSettings] = None):
        self.defaults = defaults if defaults is not None else AppSettings()

    def load_settings(self, file_path: Optional[Union[str, Path]]) -> AppSettings:
        if file_path is None:
            return self.defaults
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                root = yaml.safe_load(f)
            if root is None:
                logger.info(f"Settings file {file_path} is empty. Using defaults.")
                return self.defaults
            if not isinstance(root, dict):
                logger.error(f"Settings YAML {file_path} root is not a dict: {type(root)}. Using defaults.")
                return self.defaults
            settings = AppSettings(**{**self.defaults.model_dump(), **root})
            logger.info(f"Loaded settings from {file_path}")
            return settings
        except FileNotFoundError:
            logger.warning(f"Settings file not found: {file_path}. Using defaults.")
            return self.defaults
        except yaml.YAMLError as e:
            logger.error(f"Error parsing YAML file {file_path}: {e}")
            return self.defaults
        except ValidationError as e:
            logger.error(f"Invalid settings in {file_path}: {e}")
            return self.defaults
        except Exception as e:
            logger.error(f"Error loading settings from {file_path}: {e}. Using defaults.")
            return self.defaults
