from __future__ import annotations

from typing import List

from fastapi import APIRouter

from netbill.billing.api.billing_routes import router as billing_router


def get_routers() -> List[APIRouter]:
    return [billing_router]
