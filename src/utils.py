import yaml

from pathlib import Path
from typing import Any

def load_config(config_path: str = 'cfg/config.yaml', subconfig: str | None = None) -> dict[str, Any]:
   """
   Load configuration from YAML file.
   
   Args:
      config_path: Path to config.yaml file.
      subconfig: Optional top-level section to return (e.g. 'database').
      
   Returns:
      The whole configuration, or the requested section, as a dictionary.
   """
   config_file = Path(config_path)
   if not config_file.exists():
      raise FileNotFoundError(f"config.yaml not found at: {config_path}")

   try:
      with open(config_file, 'r', encoding='utf-8') as f:
         config = yaml.safe_load(f) or {}
   except yaml.YAMLError as e:
      raise RuntimeError(f"Failed to load config.yaml: {e}")

   if subconfig is None:
      return config

   if subconfig not in config:
      raise KeyError(f"Section '{subconfig}' not found in config.yaml")
   return config[subconfig] or {}
