# Copyright (c) 2025-2026 OptimNow. All Rights Reserved.
# Licensed under the Apache License, Version 2.0.
# See LICENSE file in the project root for full license information.

"""Translation of API errors into tool-level errors."""

from typing import NoReturn, Optional

from ..errors import AccessDeniedError, ApiError, NotFoundError, ToolExecutionError


def raise_for_api_error(
    error: ApiError,
    operation: str,
    resource: str,
    resource_id: Optional[str] = None,
    access_resource: Optional[str] = None,
    access_resource_id: Optional[str] = None,
) -> NoReturn:
    """
    Re-raise an ``ApiError`` as the error a tool reports.

    Classification uses the numeric status code: 404 becomes
    ``NotFoundError``, 403 becomes ``AccessDeniedError`` and anything else
    becomes ``ToolExecutionError``. The original error is always chained.

    Args:
        error: The failed API call
        operation: Operation text for generic failures ("fetch issues")
        resource: Resource named in not-found messages ("Project")
        resource_id: Id named in not-found messages
        access_resource: Resource named in access-denied messages
            (defaults to ``resource`` lower-cased)
        access_resource_id: Id named in access-denied messages
            (defaults to ``resource_id``)
    """
    if error.status_code == 404:
        raise NotFoundError(resource, resource_id) from error

    if error.status_code == 403:
        raise AccessDeniedError(
            access_resource or resource.lower(),
            access_resource_id if access_resource_id is not None else resource_id,
        ) from error

    raise ToolExecutionError(operation, error) from error
