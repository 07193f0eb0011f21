"""
Health Checks
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timedelta, UTC
from enum import IntEnum, auto


class HealthCheckStatus(IntEnum):
    """
    HealthCheckStatus
    """

    # healthy
    GREEN = auto()

    # functioning, but requires attention, e.g., the IPFS gateway is answering with errors
    YELLOW = auto()

    # unhealthy, e.g., the database cannot be queried
    RED = auto()


class HealthCheckImpact(IntEnum):
    """
    Used to prioritize health check failures, e.g., (RED, HIGH) before (YELLOW, LOW)
    """

    HIGH = auto()
    MEDIUM = auto()
    LOW = auto()


class YellowHealthCheck(Exception):
    """
    Indicates HealthCheck is in a YELLOW state
    """


class RedHealthCheck(Exception):
    """
    Indicates HealthCheck is in a RED state
    """


@dataclass(slots=True)
class HealthCheckResult:
    """
    HealthCheckResult
    """

    # HealthCheck.name
    name: str

    status: HealthCheckStatus

    # when the health check was run
    timestamp: datetime
    # how long it took to run the health check
    duration: timedelta

    error: Exception | None = None


@dataclass(slots=True)
class HealthCheck(ABC):
    """
    HealthCheck
    """

    name: str

    # used to categorize healthchecks, e.g. database, ipfs
    tags: set[str]
    description: str

    impact: HealthCheckImpact

    last_result: HealthCheckResult | None = field(default=None, init=False)

    def __call__(self) -> HealthCheckResult:
        start = datetime.now(UTC)
        status = HealthCheckStatus.GREEN
        error: Exception | None = None
        try:
            self.execute()
        except YellowHealthCheck as err:
            status, error = HealthCheckStatus.YELLOW, err
        except Exception as err:  # pylint: disable=broad-exception-caught
            status, error = HealthCheckStatus.RED, err

        self.last_result = HealthCheckResult(
            name=self.name,
            status=status,
            timestamp=start,
            duration=datetime.now(UTC) - start,
            error=error,
        )
        return self.last_result

    @abstractmethod
    def execute(self):
        """
        Execute the health check

        :exception YellowHealthCheck: indicates healthcheck current status is `YELLOW`
        :exception RedHealthCheck: indicates healthcheck current status is `RED`
        :exception Exception: any other exception is treated as `RED`
        """
