from fastapi import Request

from storefront.config import Settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notification_gateway(request: Request):
    return request.app.state.notifier
