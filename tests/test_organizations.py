# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not use this file except
# in compliance with the License. You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software distributed under the License
# is distributed on an "AS IS" BASIS, WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express
# or implied. See the License for the specific language governing permissions and limitations under
# the License.

"""Tests for the organizations and API keys resources."""

import pytest
from conftest import ORG_ID, USER_ID, WALLET_ID, envelope, reply

from transactions_sdk import ValidationError
from transactions_sdk.models import BalanceWalletAction, CreatedApiKey, OrgRole

ORGANIZATION = {
    "id": ORG_ID,
    "name": "Acme",
    "owner_id": USER_ID,
    "created_at": "2025-01-02T03:04:05Z",
    "updated_at": "2025-01-02T03:04:05Z",
    "description": None,
}

MEMBER = {
    "id": WALLET_ID,
    "organizationId": ORG_ID,
    "userId": USER_ID,
    "username": "bob",
    "email": "bob@example.com",
    "role": "admin",
    "createdAt": "2025-01-02T03:04:05Z",
}

API_KEY = {
    "id": WALLET_ID,
    "name": "ci",
    "permissions": ["wallet:read"],
    "status": "active",
    "created_at": "2025-01-02T03:04:05Z",
    "organization_id": ORG_ID,
    "expires_at": None,
}


class TestOrganizationsAPI:
    @pytest.mark.asyncio
    async def test_create(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(envelope(ORGANIZATION), status_code=201))
        organization = await sdk.organizations.create({"name": "Acme"})
        assert organization.name == "Acme"
        assert organization.description is None
        assert recorder.last_json() == {"name": "Acme"}

    @pytest.mark.asyncio
    async def test_list_converts_page_to_offset(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"organizations": [ORGANIZATION], "totalCount": 1}))
        result = await sdk.organizations.list({"page": 3, "limit": 20, "search": "ac"})
        assert result.organizations[0].name == "Acme"
        assert dict(recorder.last.url.params) == {"limit": "20", "search": "ac", "offset": "40"}

    @pytest.mark.asyncio
    async def test_list_rejects_page_zero(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError):
            await sdk.organizations.list({"page": 0})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_update_is_a_put(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(ORGANIZATION))
        await sdk.organizations.update(ORG_ID, {"description": "Widgets"})
        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == f"/v1/organizations/{ORG_ID}"

    @pytest.mark.asyncio
    async def test_members(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(MEMBER))
        member = await sdk.organizations.add_member(ORG_ID, {"user_id": USER_ID, "role": "admin"})
        assert member.role is OrgRole.ADMIN
        assert recorder.last_json() == {"userId": USER_ID, "role": "admin"}

        await sdk.organizations.update_member(ORG_ID, USER_ID, {"role": OrgRole.MEMBER})
        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == f"/v1/organizations/{ORG_ID}/members/{USER_ID}"

    @pytest.mark.asyncio
    async def test_list_members(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"members": [MEMBER], "totalCount": 1}))
        result = await sdk.organizations.list_members(ORG_ID, {"page": 2})
        assert result.members[0].username == "bob"
        assert dict(recorder.last.url.params) == {"offset": "10"}

    @pytest.mark.asyncio
    async def test_member_role_is_checked(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(MEMBER))
        with pytest.raises(ValidationError):
            await sdk.organizations.add_member(ORG_ID, {"user_id": USER_ID, "role": "emperor"})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_remove_member(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(status_code=204))
        await sdk.organizations.remove_member(ORG_ID, USER_ID)
        assert recorder.last.method == "DELETE"

    @pytest.mark.asyncio
    async def test_deploy_balance_wallet(self, make_sdk):
        payload = {
            "organizationbalancewalletId": WALLET_ID,
            "organizationbalancewalletPublickey": "0xcontract",
            "status": "pending",
        }
        sdk, recorder, _ = make_sdk(reply(envelope(payload)))
        result = await sdk.organizations.deploy_balance_wallet(
            {"network": "sepolia", "wallet_id": WALLET_ID, "organization_id": ORG_ID}
        )
        assert result.contract_address == "0xcontract"
        assert recorder.last.url.path == "/v1/organizations/OrganizationBalancesWalletUpgradeable"

    @pytest.mark.asyncio
    async def test_update_balance_wallet(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"transactionId": WALLET_ID, "status": "pending"}))
        await sdk.organizations.update_balance_wallet(
            {
                "organization_id": ORG_ID,
                "wallet_id": WALLET_ID,
                "network": "sepolia",
                "action": BalanceWalletAction.PAUSE_CONTRACT,
            }
        )
        assert recorder.last.method == "PATCH"
        assert recorder.last_json()["action"] == "pausecontract"

    @pytest.mark.asyncio
    async def test_list_balance_wallets(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({"wallets": [], "totalCount": 0}))
        await sdk.organizations.list_balance_wallets({"organization_id": ORG_ID, "page": 1})
        assert dict(recorder.last.url.params) == {"organizationId": ORG_ID, "offset": "0"}


class TestApiKeysAPI:
    @pytest.mark.asyncio
    async def test_create_returns_secret(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({**API_KEY, "key": "sk_live_123"}, status_code=201))
        created = await sdk.api_keys.create(
            {"name": "ci", "permissions": ["wallet:read"], "organization_id": ORG_ID}
        )
        assert isinstance(created, CreatedApiKey)
        assert created.key == "sk_live_123"
        assert recorder.last_json()["permissions"] == ["wallet:read"]

    @pytest.mark.asyncio
    async def test_create_without_secret_in_response_fails(self, make_sdk):
        sdk, _, _ = make_sdk(reply(API_KEY))
        with pytest.raises(ValidationError) as exc_info:
            await sdk.api_keys.create(
                {"name": "ci", "permissions": ["wallet:read"], "organization_id": ORG_ID}
            )
        assert exc_info.value.locations() == ["$.key"]

    @pytest.mark.asyncio
    async def test_create_needs_a_permission(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply({}))
        with pytest.raises(ValidationError):
            await sdk.api_keys.create({"name": "ci", "permissions": [], "organization_id": ORG_ID})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_list_and_get(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply([API_KEY]))
        keys = await sdk.api_keys.list()
        assert keys[0].key is None
        assert recorder.last.url.path == "/v1/api-keys"

        sdk, recorder, _ = make_sdk(reply(API_KEY))
        key = await sdk.api_keys.get(WALLET_ID)
        assert key.name == "ci"

    @pytest.mark.asyncio
    async def test_update(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(API_KEY))
        await sdk.api_keys.update(WALLET_ID, {"status": "inactive"})
        assert recorder.last.method == "PATCH"
        assert recorder.last_json() == {"status": "inactive"}

    @pytest.mark.asyncio
    async def test_update_cannot_revoke(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(API_KEY))
        with pytest.raises(ValidationError):
            await sdk.api_keys.update(WALLET_ID, {"status": "revoked"})
        assert recorder.requests == []

    @pytest.mark.asyncio
    async def test_delete(self, make_sdk):
        sdk, recorder, _ = make_sdk(reply(status_code=204))
        await sdk.api_keys.delete(WALLET_ID)
        assert recorder.last.url.path == f"/v1/api-keys/{WALLET_ID}"
