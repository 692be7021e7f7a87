"""Rule Chain — composes rules with AND/OR and reduces them to one result.

This is the main entry point for validation. Rules are attached left to right
and evaluated with short-circuiting; failure messages are aggregated as the
chain is walked.

Usage:
    result = (
        RuleChain()
        .and_(rules.non_empty(name))
        .and_(rules.max_len(name, 64))
        .or_(rules.is_uuid_v4(name))
        .validate()
    )
    if not result.is_valid:
        # Report result.messages
"""

import time
from typing import Any

import structlog

from fluentcheck.validators.base import BaseRule, as_rule
from fluentcheck.validators.models import ChainStep, Operator, ValidationResult, fail, success

logger = structlog.get_logger()


class RuleChain:
    """Ordered list of (rule, operator) steps plus the evaluation algorithm.

    Evaluation rules:
        - The first step always runs; its operator is ignored
        - AND: skipped once the chain is failing; a failure adds its messages
        - OR: skipped once the chain is passing; a success clears every
          message collected so far, a failure adds its messages
        - No precedence: ``a AND b OR c`` means ``(a AND b) OR c``

    Attaching is not thread-safe. A fully built chain can be validated any
    number of times, from any thread, if its rules allow it.
    """

    def __init__(self) -> None:
        self._steps: list[ChainStep] = []

    def and_(self, rule: Any) -> "RuleChain":
        """Attach a rule with AND semantics and return this chain."""
        self._steps.append(ChainStep(rule=as_rule(rule), operator=Operator.AND))
        return self

    def or_(self, rule: Any) -> "RuleChain":
        """Attach a rule with OR semantics and return this chain."""
        self._steps.append(ChainStep(rule=as_rule(rule), operator=Operator.OR))
        return self

    def validate(self) -> ValidationResult:
        """Evaluate the chain left to right.

        Returns:
            success() if the chain holds, otherwise fail() with the
            aggregated messages in the order they were produced
        """
        if not self._steps:
            return success()

        start_time = time.perf_counter()
        acc_valid = False
        messages: list[str] = []
        evaluated = 0

        for i, step in enumerate(self._steps):
            if i == 0:
                res = self._run(step.rule)
                evaluated += 1
                acc_valid = res.is_valid
                if not res.is_valid:
                    messages.extend(res.messages)
                continue

            if step.operator is Operator.AND:
                # Already failing: AND cannot change the outcome
                if not acc_valid:
                    continue
                res = self._run(step.rule)
                evaluated += 1
                if not res.is_valid:
                    messages.extend(res.messages)
                acc_valid = acc_valid and res.is_valid
            else:
                # Already passing: OR cannot change the outcome
                if acc_valid:
                    continue
                res = self._run(step.rule)
                evaluated += 1
                if res.is_valid:
                    messages = []
                else:
                    messages.extend(res.messages)
                acc_valid = acc_valid or res.is_valid

        result = success() if acc_valid else fail(*messages)

        logger.debug(
            "chain_evaluated",
            steps=len(self._steps),
            evaluated=evaluated,
            skipped=len(self._steps) - evaluated,
            is_valid=result.is_valid,
            message_count=len(result.messages),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 3),
        )

        return result

    @staticmethod
    def _run(rule: BaseRule) -> ValidationResult:
        """Invoke one rule, turning a crash into a failing result."""
        try:
            res = rule.validate()
            if not isinstance(res, ValidationResult):
                raise TypeError(f"expected ValidationResult, got {type(res).__name__}")
            return res
        except Exception as e:
            logger.error(
                "rule_failed",
                rule=rule.name,
                error=str(e),
            )
            # Don't let one broken rule take down the whole chain
            return fail(f"rule '{rule.name}' crashed: {e}")

    def __repr__(self) -> str:
        return f"<RuleChain steps={len(self._steps)}>"
