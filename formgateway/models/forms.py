"""Form-related Pydantic models"""
from pydantic import BaseModel
from typing import List, Dict, Optional


class FieldViolation(BaseModel):
    """A single violated field constraint"""
    field: str
    message: str


class ValidationOutcome(BaseModel):
    """Result of validating a submission against a rule table"""
    record: Optional[Dict[str, str]] = None
    errors: List[FieldViolation] = []

    @property
    def is_valid(self) -> bool:
        return not self.errors


class FormSubmitResponse(BaseModel):
    """Form submission response"""
    message: str
    status: str = "success"


class ValidationErrorResponse(BaseModel):
    """Body returned when a submission fails validation"""
    errors: List[FieldViolation]


class ErrorResponse(BaseModel):
    """Body returned for any other failure"""
    error: str


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: str
    service: str
    environment: str
    endpoints: List[str] = []
