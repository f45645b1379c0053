"""
Capability contract descriptors.

A contract is the fixed set of operations the orchestration artifact
implements. The built-in contract mirrors the PaymentProcessor interface;
other contracts can be declared in a JSON file:

    {
      "name": "PaymentProcessor",
      "import": "com.example.service.PaymentProcessor",
      "operations": [
        {"name": "createPayload", "returns": "string", "parameters": []},
        {"name": "refund", "returns": "boolean",
         "parameters": [{"name": "orderId", "type": "String"}]}
      ]
    }
"""

import json
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

from ...logging_config import get_logger
from .generator import ContractNotFoundError

logger = get_logger(__name__)


class ReturnKind(Enum):
    """Declared return kinds; values are the Java type names used by default."""

    VOID = "void"
    STRING = "String"
    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    DOUBLE = "double"
    RESPONSE_ENTITY = "ResponseEntity<?>"
    COLLECTION = "java.util.List<Object>"
    OBJECT = "Object"

    @classmethod
    def parse(cls, raw: str) -> "ReturnKind":
        key = str(raw).strip().lower().replace("-", "_")
        for kind in cls:
            if kind.name.lower() == key:
                return kind
        raise ValueError(f"Unknown return kind: {raw}")


@dataclass(frozen=True)
class ParameterDescriptor:
    """A declared operation parameter."""

    name: str
    type: str


@dataclass(frozen=True)
class OperationDescriptor:
    """Name, return kind and parameters of one contract operation."""

    name: str
    returns: ReturnKind
    parameters: Tuple[ParameterDescriptor, ...] = ()
    return_type: Optional[str] = None

    @property
    def return_type_name(self) -> str:
        """Declared return type as written in source."""
        return self.return_type or self.returns.value


@dataclass(frozen=True)
class CapabilityContract:
    """A closed set of operations plus the import that declares them."""

    name: str
    import_path: Optional[str]
    operations: Tuple[OperationDescriptor, ...]

    @property
    def operation_names(self) -> Tuple[str, ...]:
        return tuple(op.name for op in self.operations)


PAYMENT_PROCESSOR_CONTRACT = CapabilityContract(
    name="PaymentProcessor",
    import_path="com.durgesh.service.PaymentProcessor",
    operations=(
        OperationDescriptor("createPayload", ReturnKind.STRING),
        OperationDescriptor("createRequest", ReturnKind.VOID),
        OperationDescriptor("checkStatus", ReturnKind.VOID),
        OperationDescriptor("executeWebhook", ReturnKind.RESPONSE_ENTITY),
        OperationDescriptor("getTimeoutMsg", ReturnKind.VOID),
        OperationDescriptor("createResponseEntity", ReturnKind.RESPONSE_ENTITY),
        OperationDescriptor("getOrderId", ReturnKind.STRING),
        OperationDescriptor("postRedirectAfterCustVerification", ReturnKind.RESPONSE_ENTITY),
        OperationDescriptor("threeDSVerify", ReturnKind.VOID),
    ),
)


def _require_text(value: Any, what: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ContractNotFoundError(
            f"Malformed contract definition: {what} must be a non-empty string"
        )
    return value


def _optional_text(value: Any, what: str) -> Optional[str]:
    if value is None:
        return None
    return _require_text(value, what)


def contract_from_dict(data: Dict[str, Any]) -> CapabilityContract:
    """
    Build a contract from its JSON form.

    Raises:
        ContractNotFoundError: If the structure is not a valid contract
    """
    if not isinstance(data, dict):
        raise ContractNotFoundError("Malformed contract definition: expected a JSON object")

    raw_operations = data.get("operations")
    if not isinstance(raw_operations, list):
        raise ContractNotFoundError("Malformed contract definition: 'operations' must be a list")

    operations = []
    for index, op in enumerate(raw_operations):
        if not isinstance(op, dict):
            raise ContractNotFoundError(
                f"Malformed contract definition: operation {index} is not an object"
            )

        raw_parameters = op.get("parameters", [])
        if not isinstance(raw_parameters, list) or not all(
            isinstance(p, dict) for p in raw_parameters
        ):
            raise ContractNotFoundError(
                f"Malformed contract definition: parameters of operation {index} "
                "must be a list of objects"
            )

        try:
            returns = ReturnKind.parse(op.get("returns", "void"))
        except ValueError as e:
            raise ContractNotFoundError(f"Malformed contract definition: {e}") from e

        operations.append(
            OperationDescriptor(
                name=_require_text(op.get("name"), f"name of operation {index}"),
                returns=returns,
                parameters=tuple(
                    ParameterDescriptor(
                        name=_require_text(p.get("name"), "parameter name"),
                        type=_require_text(p.get("type"), "parameter type"),
                    )
                    for p in raw_parameters
                ),
                return_type=_optional_text(op.get("returnType"), "returnType"),
            )
        )

    return CapabilityContract(
        name=_require_text(data.get("name"), "contract name"),
        import_path=_optional_text(data.get("import"), "import"),
        operations=tuple(operations),
    )


def load_contract(path: Optional[Union[str, Path]] = None) -> CapabilityContract:
    """
    Locate the capability contract.

    Args:
        path: JSON contract definition; None returns the built-in contract

    Raises:
        ContractNotFoundError: If the file is missing, unreadable or malformed
    """
    if path is None:
        return PAYMENT_PROCESSOR_CONTRACT

    contract_path = Path(path)
    try:
        with open(contract_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ContractNotFoundError(f"Contract file not readable: {contract_path}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ContractNotFoundError(f"Invalid JSON in contract file {contract_path}: {e}") from e

    if not isinstance(data, dict):
        raise ContractNotFoundError(f"Contract file must contain a JSON object: {contract_path}")

    contract = contract_from_dict(data)
    logger.debug("Loaded contract %s with %d operations", contract.name, len(contract.operations))
    return contract
