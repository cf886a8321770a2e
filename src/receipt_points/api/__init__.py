# SPDX-License-Identifier: MPL-2.0
"""HTTP API for Receipt Points."""
from receipt_points.api.app import create_app
from receipt_points.api.routes import router

__all__ = ["create_app", "router"]
