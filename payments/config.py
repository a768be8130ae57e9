# payments/config.py
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from payments.gateways import PAYMENT_GW_TYPE_ENV_VAR


@dataclass(frozen=True)
class Settings:
    service_name: str = "payments-service"
    log_level: str = "INFO"
    payment_gw: Optional[str] = None
    host: str = "0.0.0.0"
    port: int = 8080
    cors_path_prefix: str = "/api/"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        return cls(
            service_name=os.getenv("SERVICE_NAME", "payments-service"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            # unset stays None so the selector can warn about it
            payment_gw=os.getenv(PAYMENT_GW_TYPE_ENV_VAR),
            host=os.getenv("SERVICE_HOST", "0.0.0.0"),
            port=int(os.getenv("SERVICE_PORT", "8080")),
            cors_path_prefix=os.getenv("CORS_PATH_PREFIX", "/api/"),
        )
