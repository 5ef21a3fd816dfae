"""
Exceptions Package
Framework exception hierarchy
"""
from viewkit.exceptions.custom import (
    FrameworkException,
    HttpException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    MethodNotAllowedException,
    ConflictException,
    TooManyRequestsException,
    InternalErrorException,
    ServiceUnavailableException,
    MissingPluginException,
    MissingControllerException,
)

__all__ = [
    'FrameworkException',
    'HttpException',
    'BadRequestException',
    'UnauthorizedException',
    'ForbiddenException',
    'NotFoundException',
    'MethodNotAllowedException',
    'ConflictException',
    'TooManyRequestsException',
    'InternalErrorException',
    'ServiceUnavailableException',
    'MissingPluginException',
    'MissingControllerException',
]
