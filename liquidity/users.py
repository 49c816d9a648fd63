"""Card holder (KYC user) management."""
from __future__ import annotations

from ._resource import ResourceClient
from .models import (
    CreateUserData,
    CreateUserResponse,
    UpdateUserAddressData,
    UpdateUserAddressResponse,
    UserDocumentUrlsResponse,
    UserResponse,
)
from .params import with_query

__all__ = ["UsersClient"]


class UsersClient(ResourceClient):
    def create_user(self, data: CreateUserData) -> CreateUserResponse:
        return self.http.post("/card/v1/user", data, target=CreateUserResponse)

    def get_user(self, user_id: str) -> UserResponse:
        return self.http.get(with_query("/card/v1/user", [("user", user_id)]), target=UserResponse)

    def update_address(self, data: UpdateUserAddressData) -> UpdateUserAddressResponse:
        """Change address, city, postal code and/or KYC country of a user."""
        return self.http.patch("/card/v1/user/address", data, target=UpdateUserAddressResponse)

    def get_document_urls(self, user_id: str) -> UserDocumentUrlsResponse:
        """Pre-signed URLs the user uploads their selfie and ID document to."""
        path = with_query("/card/v1/user/documentation/urls", [("user", user_id)])
        return self.http.get(path, target=UserDocumentUrlsResponse)
