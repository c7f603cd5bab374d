from pydantic import BaseModel
from typing import List


class ErrorResponse(BaseModel):
    """Error response schema"""
    detail: str


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    processors: List[str]


class ServiceInfoResponse(BaseModel):
    """Root endpoint response"""
    message: str
    version: str
    docs: str
