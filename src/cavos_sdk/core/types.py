"""Core type definitions for the Cavos SDK."""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, validator

# Request bodies forward caller values unchanged; the wallet provider
# validates them.


class DeployRequest(BaseModel):
    """Body of a wallet deployment request."""
    network: Any


class ExecuteRequest(BaseModel):
    """Body of a transaction execution request."""
    network: Any
    calls: Any
    address: Any
    hashed_pk: Any = Field(..., alias='hashedPk')


class FormatAmountRequest(BaseModel):
    """Body of an amount formatting request."""
    amount: Any
    decimals: Any = 18


class DeleteUserRequest(BaseModel):
    """Body of an organization user deletion request."""
    user_id: Any


class RegisterRequest(BaseModel):
    """Body of a gateway registration request."""
    email: Any
    password: Any
    network: Any = 'sepolia'


class LoginRequest(BaseModel):
    """Body of a gateway login request."""
    email: Any
    password: Any


class RefreshRequest(BaseModel):
    """Body of a gateway token refresh request."""
    refresh_token: Any


class LogoutRequest(BaseModel):
    """Body of a gateway logout request."""
    access_token: Any


class OrganizationRecord(BaseModel):
    """Organization row read from the metadata store."""
    org_id: str
    auth0_orgid: str
    supabase_id: Optional[int] = None

    class Config:
        frozen = True

    @validator('auth0_orgid')
    def validate_auth0_orgid(cls, v):
        if not v:
            raise ValueError('auth0_orgid must not be empty')
        return v

    def descriptor(self, include_internal_id: bool = False) -> Dict[str, Any]:
        """Organization block embedded in aggregated results."""
        data: Dict[str, Any] = {
            'org_id': self.org_id,
            'auth0_orgid': self.auth0_orgid,
        }
        if include_internal_id:
            data['supabase_id'] = self.supabase_id
        return data


class SessionTokens(BaseModel):
    """Tokens returned by the identity provider's token endpoint."""
    access_token: Optional[str] = None
    id_token: Optional[str] = None
    refresh_token: Optional[str] = None
    expires_in: Optional[int] = None
    token_type: Optional[str] = None

    class Config:
        frozen = True

    def user_fields(self) -> Dict[str, Optional[str]]:
        """Token fields merged into the signed-in user record."""
        return {
            'access_token': self.access_token,
            'id_token': self.id_token,
            'refresh_token': self.refresh_token,
        }


class AppleUserData(BaseModel):
    """User data delivered to the redirect target after Apple login."""
    user_id: str
    email: Optional[str] = None
    wallet: Optional[Dict[str, Any]] = None
    created_at: Optional[str] = None

    class Config:
        frozen = True
