# cosmos_indexer/types/messages.py

"""
Decoded contract-message payloads.

CosmWasm messages are externally tagged JSON objects: the single top-level key
names the variant (``{"transfer": {...}}``). Each known variant has one Struct
here, registered by its key in ``EXECUTE_MESSAGES``. Nested tagged values
(module references, module versions, governance, asset info) are decoded by
``from_raw`` constructors through the ``dec_hook`` passed to msgspec.
"""

from typing import Optional, List, Dict, Any, Tuple, Type, ClassVar, Union

import msgspec
from msgspec import Struct

from .new import CosmosAddress, AmountStr


def single_entry(raw: Any, what: str) -> Tuple[str, Any]:
    """Split an externally tagged value into (tag, payload).

    Unit variants serialize as a bare string and yield a ``None`` payload.
    """
    if isinstance(raw, str):
        return raw, None
    if not isinstance(raw, dict) or len(raw) != 1:
        raise msgspec.ValidationError(f"Expected a single-key object for {what}, got {raw!r}")
    (tag, payload), = raw.items()
    return tag, payload


class TaggedValue:
    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name in self.__slots__)

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={getattr(self, name)!r}" for name in self.__slots__)
        return f"{self.__class__.__name__}({fields})"


class ModuleReference(TaggedValue):
    """``{"wasm": "juno1..."}``, ``{"native": "juno1..."}``, ``{"app": 12}``"""
    __slots__ = ("kind", "address")

    def __init__(self, kind: str, address: Optional[str]):
        self.kind = kind
        self.address = address

    @classmethod
    def from_raw(cls, raw: Any) -> "ModuleReference":
        kind, value = single_entry(raw, "module reference")
        return cls(kind=kind, address=None if value is None else str(value))


class ModuleVersion(TaggedValue):
    """``"latest"`` or ``{"version": "1.2.0"}``"""
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    @classmethod
    def from_raw(cls, raw: Any) -> "ModuleVersion":
        tag, payload = single_entry(raw, "module version")
        if tag == "version":
            return cls(str(payload))
        if payload is None:
            return cls(tag)
        raise msgspec.ValidationError(f"Unknown module version variant {tag!r}")

    def __str__(self) -> str:
        return self.value


class Governance(TaggedValue):
    """``{"Monarchy": {"monarch": addr}}`` or ``{"External": {"governance_address": addr}}``"""
    __slots__ = ("kind", "owner")

    def __init__(self, kind: str, owner: Optional[CosmosAddress]):
        self.kind = kind
        self.owner = owner

    @classmethod
    def from_raw(cls, raw: Any) -> "Governance":
        tag, payload = single_entry(raw, "governance")
        owner = None
        if isinstance(payload, dict):
            owner = payload.get("monarch") or payload.get("governance_address")
        return cls(kind=tag.lower(), owner=owner)


class AssetInfo(TaggedValue):
    """``{"cw20": "juno1..."}`` or ``{"native": "ujuno"}``"""
    __slots__ = ("kind", "address")

    def __init__(self, kind: str, address: Optional[str]):
        self.kind = kind
        self.address = address

    @classmethod
    def from_raw(cls, raw: Any) -> "AssetInfo":
        kind, value = single_entry(raw, "asset info")
        return cls(kind=kind, address=None if value is None else str(value))


def _dec_hook(type_: Type, obj: Any) -> Any:
    if isinstance(type_, type) and issubclass(type_, TaggedValue):
        return type_.from_raw(obj)
    raise NotImplementedError(f"Objects of type {type_} are not supported")


class ModuleInfo(Struct):
    namespace: str
    name: str
    version: ModuleVersion

    @property
    def id(self) -> str:
        return f"{self.namespace}:{self.name}"


class ContractMsg(Struct):
    kind: ClassVar[str] = ""


class Transfer(ContractMsg):
    kind: ClassVar[str] = "transfer"
    recipient: CosmosAddress
    amount: AmountStr = "0"

    @property
    def destination(self) -> CosmosAddress:
        return self.recipient

class Send(ContractMsg):
    kind: ClassVar[str] = "send"
    contract: CosmosAddress
    amount: AmountStr
    msg: Optional[str] = None

    @property
    def destination(self) -> CosmosAddress:
        return self.contract

class AddModules(ContractMsg):
    kind: ClassVar[str] = "add_modules"
    modules: List[Tuple[ModuleInfo, ModuleReference]]

class UpdateAssetAddresses(ContractMsg):
    kind: ClassVar[str] = "update_asset_addresses"
    to_add: List[Tuple[str, AssetInfo]] = []
    to_remove: List[str] = []

class CreateAccount(ContractMsg):
    kind: ClassVar[str] = "create_account"
    governance: Governance
    name: str
    description: Optional[str] = None
    link: Optional[str] = None

class InstallModule(ContractMsg):
    kind: ClassVar[str] = "install_module"
    module: ModuleInfo
    init_msg: Optional[Any] = None

class ExecOnModule(ContractMsg):
    """``module_id`` may sit beside ``exec_msg`` or inside it"""
    kind: ClassVar[str] = "exec_on_module"
    module_id: Optional[str] = None
    exec_msg: Optional[Any] = None

    def __post_init__(self):
        if self.module_id is None and isinstance(self.exec_msg, dict):
            self.module_id = self.exec_msg.get("module_id")
        if not self.module_id:
            raise ValueError("exec_on_module without module_id")


TransferLike = Union[Transfer, Send]

EXECUTE_MESSAGES: Dict[str, Type[ContractMsg]] = {
    cls.kind: cls
    for cls in (Transfer, Send, AddModules, UpdateAssetAddresses,
                CreateAccount, InstallModule, ExecOnModule)
}


def decode_execute_msg(msg: Dict[str, Any]) -> Optional[ContractMsg]:
    """Decode an execute payload into its variant; unknown kinds yield None"""
    tag, body = single_entry(msg, "execute message")
    msg_class = EXECUTE_MESSAGES.get(tag)
    if msg_class is None:
        return None
    return msgspec.convert(body if body is not None else {}, type=msg_class, dec_hook=_dec_hook)


def split_asset_entry(entry: str) -> Tuple[Optional[str], str]:
    """``"junoswap>juno"`` -> ("junoswap", "juno"); no separator means no source"""
    source, sep, name = entry.partition(">")
    if not sep:
        return None, entry
    return source, name


# Token contract instantiation (cw20)

class Cw20Coin(Struct):
    address: CosmosAddress
    amount: AmountStr

class MinterResponse(Struct):
    minter: CosmosAddress
    cap: Optional[AmountStr] = None

class Cw20Instantiate(Struct):
    name: str
    symbol: str
    decimals: int
    initial_balances: List[Cw20Coin] = []
    mint: Optional[MinterResponse] = None
    marketing: Optional[Dict[str, Any]] = None

    @classmethod
    def decode(cls, msg: Dict[str, Any]) -> "Cw20Instantiate":
        return msgspec.convert(msg, type=cls)
