"""Standardized response utilities for MCP tools."""

from typing import Any, Dict, List, Optional


def is_success(result: Dict[str, Any]) -> bool:
    """Check if a tool response reports success."""
    return bool(result.get("ok"))


def success_response(
    data: Any,
    warnings: Optional[List[str]] = None
) -> Dict[str, Any]:
    """Create a successful response envelope.
    
    Args:
        data: The response data
        warnings: Optional list of warning messages
        
    Returns:
        Standardized success response
    """
    response = {
        "ok": True,
        "data": data
    }
    
    if warnings:
        response["warnings"] = warnings
    
    return response


def error_response(
    message: str,
    code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create an error response envelope.
    
    Args:
        message: Error message
        code: Optional error code
        details: Optional error details
        
    Returns:
        Standardized error response
    """
    error = {"message": message}
    
    if code:
        error["code"] = code
    
    if details:
        error["details"] = details
    
    return {
        "ok": False,
        "error": error
    }
