"""Sequential driver for executable labels."""

from __future__ import annotations

from vnscript.config import get_logger
from vnscript.exceptions import StepExecutionError
from vnscript.labels.models import ExecutableLabel, StepResult

logger = get_logger(__name__)


class LabelRunner:
    """Run label steps strictly in order, one at a time.

    A step is awaited to completion before the next one starts, so layer
    placement and dialogue updates reach the engine in document order.
    """

    async def run_step(self, label: ExecutableLabel, index: int) -> StepResult:
        """Run a single step of a label.

        Args:
            label: Label to run
            index: Zero-based step index

        Returns:
            Result of the step

        Raises:
            StepExecutionError: If the index is outside the label
        """
        if not 0 <= index < len(label.steps):
            raise StepExecutionError(
                message=f"Step {index} does not exist in label '{label.id}'",
                hint="Step indices start at 0.",
                details={"label": label.id, "steps": len(label.steps)},
            )
        return await label.steps[index]()

    async def run(self, label: ExecutableLabel) -> list[StepResult]:
        """Run every step of a label in order.

        Args:
            label: Label to run

        Returns:
            Step results in execution order
        """
        results: list[StepResult] = []
        for index in range(len(label.steps)):
            results.append(await self.run_step(label, index))

        degraded = [result.index for result in results if result.degraded]
        if degraded:
            logger.warning(
                "Label finished with degraded steps",
                label_id=label.id,
                degraded_steps=degraded,
            )
        else:
            logger.debug("Label finished", label_id=label.id, steps=len(results))
        return results
