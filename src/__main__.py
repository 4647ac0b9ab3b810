import os
import sys
from pathlib import Path

import uvicorn

from src.config_schema import Settings

# Change dir to project root (one level up from this file)
os.chdir(Path(__file__).parents[1])

Settings.save_schema(Path("settings.schema.yaml"))

args = sys.argv[1:]
extended_args = [
    "src.api.app:app",
    "--use-colors",
    "--proxy-headers",
    "--forwarded-allow-ips=*",
    *args,
]

print(f"🚀 Starting Uvicorn server: 'uvicorn {' '.join(extended_args)}'")
uvicorn.main.main(args=extended_args)
