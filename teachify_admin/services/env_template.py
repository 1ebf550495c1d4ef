"""Write a starter .env for local development."""

import logging
import secrets
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

ENV_TEMPLATE = """# Database
MONGODB_URI=mongodb://localhost:27017/teachify
MONGODB_DB_NAME=teachify

# JWT Secret
JWT_SECRET={jwt_secret}

# Server Port
PORT=5000

# Privileged account created by `teachify-admin seed`
ADMIN_EMAIL=admin@teachify.com
ADMIN_NAME=Admin User
ADMIN_PASSWORD=

# Cloudinary Configuration (optional)
CLOUDINARY_CLOUD_NAME=your_cloudinary_cloud_name
CLOUDINARY_API_KEY=your_cloudinary_api_key
CLOUDINARY_API_SECRET=your_cloudinary_api_secret
"""


def render_env_template() -> str:
    return ENV_TEMPLATE.format(jwt_secret=secrets.token_hex(32))


def write_env_template(path: Union[str, Path], *, overwrite: bool = False) -> bool:
    """Write the template to `path`. Returns False if an existing file was kept."""
    env_path = Path(path)
    if env_path.exists() and not overwrite:
        logger.info("%s already exists, leaving it alone", env_path)
        return False
    env_path.parent.mkdir(parents=True, exist_ok=True)
    env_path.write_text(render_env_template(), encoding="utf-8")
    logger.info("Wrote %s", env_path)
    return True
