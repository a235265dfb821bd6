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

"""Request and response models for the transactions API.

Each model is a pydantic model; response models extend :class:`WireModel`,
request and query models extend :class:`RequestModel`. See
:mod:`transactions_sdk.models._codec`.
"""

from . import api_keys, approvals, auth, contracts, organizations, permissions
from . import transactions, wallets
from ._codec import UNSET, RequestModel, WireModel, decode, encode
from .api_keys import *  # noqa: F401, F403
from .approvals import *  # noqa: F401, F403
from .auth import *  # noqa: F401, F403
from .common import MessageResponse, NumberedPageParams, PageParams
from .contracts import *  # noqa: F401, F403
from .organizations import *  # noqa: F401, F403
from .permissions import *  # noqa: F401, F403
from .transactions import *  # noqa: F401, F403
from .wallets import *  # noqa: F401, F403

__all__: list[str] = ["UNSET", "RequestModel", "WireModel", "decode", "encode"]
__all__ += ["MessageResponse", "NumberedPageParams", "PageParams"]
_MODULES = (api_keys, approvals, auth, contracts, organizations, permissions, transactions, wallets)
for _module in _MODULES:
    __all__ += _module.__all__
del _MODULES, _module
