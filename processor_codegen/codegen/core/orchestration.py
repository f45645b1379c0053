"""Builds the orchestration artifact that implements the capability contract."""

from pathlib import Path
from typing import List, Optional, Union

from ...logging_config import get_logger
from .schema import ConstantField, IntegrationConfig, OrchestrationArtifact
from .synthesizer import ContractMethodSynthesizer

logger = get_logger(__name__)


class OrchestrationEmitter:
    """Assembles constants and synthesized methods into one artifact."""

    def __init__(self, synthesizer: Optional[ContractMethodSynthesizer] = None):
        self.synthesizer = synthesizer or ContractMethodSynthesizer()

    def emit(
        self,
        integration: IntegrationConfig,
        class_name: str,
        package_name: str,
        dto_package_name: Optional[str],
        contract_file: Optional[Union[str, Path]] = None,
    ) -> OrchestrationArtifact:
        """
        Build the orchestration artifact.

        Args:
            integration: Validated processor document
            class_name: Name of the generated class
            package_name: Package of the generated class
            dto_package_name: Package to import DTOs from, None when there are none
            contract_file: Optional contract definition file
        """
        contract, methods = self.synthesizer.resolve(contract_file)

        constants: List[ConstantField] = [
            ConstantField("PROCESSOR_NAME", integration.processor_name),
            ConstantField("PROCESSOR_TYPE", integration.type),
        ]
        if integration.auth_token is not None:
            constants.append(ConstantField("AUTH_TOKEN", integration.auth_token))

        logger.debug(
            "Orchestration %s implements %s with %d methods",
            class_name,
            contract.name,
            len(methods),
        )

        return OrchestrationArtifact(
            name=class_name,
            package=package_name,
            dto_package=dto_package_name,
            contract_name=contract.name,
            contract_import=contract.import_path,
            constants=tuple(constants),
            methods=methods,
        )
