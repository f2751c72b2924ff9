"""ASGI entrypoint for the CKD diet advisor API."""

from ckd_diet_advisor.api.app import create_app
from ckd_diet_advisor.containers import build_container

app = create_app(build_container())
