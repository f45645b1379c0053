"""
Method synthesis for capability contract operations.

Known operation names map to canned bodies; anything else gets a body
returning the zero value of its declared return kind. When the contract
cannot be located, a static snapshot of the built-in contract's methods
is used instead. The snapshot must stay identical to what ``synthesize``
produces for PAYMENT_PROCESSOR_CONTRACT.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from ...logging_config import get_logger
from .contract import (
    CapabilityContract,
    OperationDescriptor,
    PAYMENT_PROCESSOR_CONTRACT,
    ReturnKind,
    load_contract,
)
from .generator import ContractNotFoundError
from .schema import MethodSpec, Parameter

logger = get_logger(__name__)

METHOD_PLACEHOLDER = "{method}"


class _CannedBody:
    """Body template for a known operation, valid for one return kind."""

    def __init__(self, returns: ReturnKind, lines: Tuple[str, ...]):
        self.returns = returns
        self.lines = lines

    def render(self, method_name: str) -> Tuple[str, ...]:
        return tuple(line.replace(METHOD_PLACEHOLDER, method_name) for line in self.lines)


# Keyed by lower-cased operation name
CANNED_BODIES: Dict[str, _CannedBody] = {
    "createpayload": _CannedBody(
        ReturnKind.STRING,
        (
            "// Create payload for {method}",
            "try {",
            "    Map<String, Object> payload = new HashMap<>();",
            '    payload.put("processorName", PROCESSOR_NAME);',
            '    payload.put("processorType", PROCESSOR_TYPE);',
            "    // TODO: Add more payload fields as needed",
            "    return objectMapper.writeValueAsString(payload);",
            "} catch (JsonProcessingException e) {",
            '    throw new RuntimeException("Error creating payload", e);',
            "}",
        ),
    ),
    "createrequest": _CannedBody(
        ReturnKind.VOID,
        (
            "// Create HTTP request for {method}",
            "HttpHeaders headers = new HttpHeaders();",
            "headers.setContentType(MediaType.APPLICATION_JSON);",
            "// TODO: Implement request creation logic",
            "// headers.setBearerAuth(AUTH_TOKEN);",
            "// HttpEntity<String> request = new HttpEntity<>(payload, headers);",
        ),
    ),
    "checkstatus": _CannedBody(
        ReturnKind.VOID,
        (
            "// Check payment status for {method}",
            "try {",
            "    // TODO: Implement status check logic",
            "    // ResponseEntity<String> response = restTemplate.exchange("
            "statusUrl, HttpMethod.GET, entity, String.class);",
            "} catch (Exception e) {",
            '    throw new RuntimeException("Error checking status", e);',
            "}",
        ),
    ),
    "executewebhook": _CannedBody(
        ReturnKind.RESPONSE_ENTITY,
        (
            "// Execute webhook for {method}",
            "try {",
            "    // TODO: Implement webhook execution logic",
            "    Map<String, Object> webhookResponse = new HashMap<>();",
            '    webhookResponse.put("status", "processed");',
            '    webhookResponse.put("processor", PROCESSOR_NAME);',
            "    return ResponseEntity.ok(webhookResponse);",
            "} catch (Exception e) {",
            '    return ResponseEntity.internalServerError().body("Webhook execution failed");',
            "}",
        ),
    ),
    "gettimeoutmsg": _CannedBody(
        ReturnKind.VOID,
        (
            "// Get timeout message for {method}",
            "// TODO: Implement timeout message logic",
            'System.out.println("Payment timeout occurred for processor: " + PROCESSOR_NAME);',
        ),
    ),
    "createresponseentity": _CannedBody(
        ReturnKind.RESPONSE_ENTITY,
        (
            "// Create response entity for {method}",
            "try {",
            "    Map<String, Object> response = new HashMap<>();",
            '    response.put("processorName", PROCESSOR_NAME);',
            '    response.put("processorType", PROCESSOR_TYPE);',
            '    response.put("timestamp", System.currentTimeMillis());',
            "    // TODO: Add more response fields",
            "    return ResponseEntity.ok(response);",
            "} catch (Exception e) {",
            '    return ResponseEntity.internalServerError().body("Error creating response");',
            "}",
        ),
    ),
    "getorderid": _CannedBody(
        ReturnKind.STRING,
        (
            "// Get order ID for {method}",
            "// TODO: Implement order ID retrieval logic",
            'return "ORDER_" + System.currentTimeMillis();',
        ),
    ),
    "postredirectaftercustverification": _CannedBody(
        ReturnKind.RESPONSE_ENTITY,
        (
            "// Post redirect after customer verification for {method}",
            "try {",
            "    // TODO: Implement post-redirect logic",
            "    Map<String, Object> redirectResponse = new HashMap<>();",
            '    redirectResponse.put("verified", true);',
            '    redirectResponse.put("redirectUrl", "/payment/success");',
            "    return ResponseEntity.ok(redirectResponse);",
            "} catch (Exception e) {",
            '    return ResponseEntity.internalServerError().body("Verification failed");',
            "}",
        ),
    ),
    "threedsverify": _CannedBody(
        ReturnKind.VOID,
        (
            "// 3DS verification for {method}",
            "try {",
            "    // TODO: Implement 3DS verification logic",
            '    System.out.println("Performing 3DS verification for processor: " + PROCESSOR_NAME);',
            "} catch (Exception e) {",
            '    throw new RuntimeException("3DS verification failed", e);',
            "}",
        ),
    ),
}

ZERO_VALUES: Dict[ReturnKind, Optional[str]] = {
    ReturnKind.VOID: None,
    ReturnKind.STRING: '""',
    ReturnKind.BOOLEAN: "false",
    ReturnKind.INT: "0",
    ReturnKind.LONG: "0L",
    ReturnKind.DOUBLE: "0.0",
    ReturnKind.COLLECTION: "java.util.Collections.emptyList()",
    ReturnKind.RESPONSE_ENTITY: "null",
    ReturnKind.OBJECT: "null",
}


def generic_body(operation: OperationDescriptor) -> Tuple[str, ...]:
    """Body for operations without a canned template."""
    lines = [f"// TODO: Implement {operation.name} logic"]
    zero_value = ZERO_VALUES[operation.returns]
    if zero_value is not None:
        lines.append(f"return {zero_value};")
    return tuple(lines)


# Methods of PAYMENT_PROCESSOR_CONTRACT, used when the contract cannot be located
STATIC_PAYMENT_PROCESSOR_METHODS: Tuple[MethodSpec, ...] = (
    MethodSpec(
        name="createPayload",
        return_type="String",
        body=(
            "// Create payload for createPayload",
            "try {",
            "    Map<String, Object> payload = new HashMap<>();",
            '    payload.put("processorName", PROCESSOR_NAME);',
            '    payload.put("processorType", PROCESSOR_TYPE);',
            "    // TODO: Add more payload fields as needed",
            "    return objectMapper.writeValueAsString(payload);",
            "} catch (JsonProcessingException e) {",
            '    throw new RuntimeException("Error creating payload", e);',
            "}",
        ),
    ),
    MethodSpec(
        name="createRequest",
        return_type="void",
        body=(
            "// Create HTTP request for createRequest",
            "HttpHeaders headers = new HttpHeaders();",
            "headers.setContentType(MediaType.APPLICATION_JSON);",
            "// TODO: Implement request creation logic",
            "// headers.setBearerAuth(AUTH_TOKEN);",
            "// HttpEntity<String> request = new HttpEntity<>(payload, headers);",
        ),
    ),
    MethodSpec(
        name="checkStatus",
        return_type="void",
        body=(
            "// Check payment status for checkStatus",
            "try {",
            "    // TODO: Implement status check logic",
            "    // ResponseEntity<String> response = restTemplate.exchange("
            "statusUrl, HttpMethod.GET, entity, String.class);",
            "} catch (Exception e) {",
            '    throw new RuntimeException("Error checking status", e);',
            "}",
        ),
    ),
    MethodSpec(
        name="executeWebhook",
        return_type="ResponseEntity<?>",
        body=(
            "// Execute webhook for executeWebhook",
            "try {",
            "    // TODO: Implement webhook execution logic",
            "    Map<String, Object> webhookResponse = new HashMap<>();",
            '    webhookResponse.put("status", "processed");',
            '    webhookResponse.put("processor", PROCESSOR_NAME);',
            "    return ResponseEntity.ok(webhookResponse);",
            "} catch (Exception e) {",
            '    return ResponseEntity.internalServerError().body("Webhook execution failed");',
            "}",
        ),
    ),
    MethodSpec(
        name="getTimeoutMsg",
        return_type="void",
        body=(
            "// Get timeout message for getTimeoutMsg",
            "// TODO: Implement timeout message logic",
            'System.out.println("Payment timeout occurred for processor: " + PROCESSOR_NAME);',
        ),
    ),
    MethodSpec(
        name="createResponseEntity",
        return_type="ResponseEntity<?>",
        body=(
            "// Create response entity for createResponseEntity",
            "try {",
            "    Map<String, Object> response = new HashMap<>();",
            '    response.put("processorName", PROCESSOR_NAME);',
            '    response.put("processorType", PROCESSOR_TYPE);',
            '    response.put("timestamp", System.currentTimeMillis());',
            "    // TODO: Add more response fields",
            "    return ResponseEntity.ok(response);",
            "} catch (Exception e) {",
            '    return ResponseEntity.internalServerError().body("Error creating response");',
            "}",
        ),
    ),
    MethodSpec(
        name="getOrderId",
        return_type="String",
        body=(
            "// Get order ID for getOrderId",
            "// TODO: Implement order ID retrieval logic",
            'return "ORDER_" + System.currentTimeMillis();',
        ),
    ),
    MethodSpec(
        name="postRedirectAfterCustVerification",
        return_type="ResponseEntity<?>",
        body=(
            "// Post redirect after customer verification for postRedirectAfterCustVerification",
            "try {",
            "    // TODO: Implement post-redirect logic",
            "    Map<String, Object> redirectResponse = new HashMap<>();",
            '    redirectResponse.put("verified", true);',
            '    redirectResponse.put("redirectUrl", "/payment/success");',
            "    return ResponseEntity.ok(redirectResponse);",
            "} catch (Exception e) {",
            '    return ResponseEntity.internalServerError().body("Verification failed");',
            "}",
        ),
    ),
    MethodSpec(
        name="threeDSVerify",
        return_type="void",
        body=(
            "// 3DS verification for threeDSVerify",
            "try {",
            "    // TODO: Implement 3DS verification logic",
            '    System.out.println("Performing 3DS verification for processor: " + PROCESSOR_NAME);',
            "} catch (Exception e) {",
            '    throw new RuntimeException("3DS verification failed", e);',
            "}",
        ),
    ),
)


class ContractMethodSynthesizer:
    """Produces one MethodSpec per capability contract operation."""

    def synthesize_operation(self, operation: OperationDescriptor) -> MethodSpec:
        """
        Synthesize the method for one operation.

        A canned body is used only when the operation's return kind matches
        the kind the canned body was written for.
        """
        canned = CANNED_BODIES.get(operation.name.lower())
        if canned is not None and canned.returns == operation.returns:
            body = canned.render(operation.name)
        else:
            body = generic_body(operation)

        return MethodSpec(
            name=operation.name,
            return_type=operation.return_type_name,
            parameters=tuple(Parameter(p.name, p.type) for p in operation.parameters),
            body=body,
        )

    def synthesize(self, contract: CapabilityContract) -> Tuple[MethodSpec, ...]:
        """Methods for every operation of ``contract``, in declaration order."""
        return tuple(self.synthesize_operation(op) for op in contract.operations)

    def synthesize_static(self) -> Tuple[MethodSpec, ...]:
        """The hardcoded methods of the built-in contract."""
        return STATIC_PAYMENT_PROCESSOR_METHODS

    def resolve(
        self, contract_file: Optional[Union[str, Path]] = None
    ) -> Tuple[CapabilityContract, Tuple[MethodSpec, ...]]:
        """
        Locate the contract and synthesize its methods.

        Falls back to the built-in contract and its static methods when the
        contract cannot be located.
        """
        try:
            contract = load_contract(contract_file)
        except ContractNotFoundError as e:
            logger.warning("Capability contract not found (%s); using static methods", e)
            return PAYMENT_PROCESSOR_CONTRACT, self.synthesize_static()

        return contract, self.synthesize(contract)
