from dataclasses import dataclass
from os import getenv
from enum import Enum
from dotenv import load_dotenv


class Environments(Enum):
    DEVELOPMENT = 'development'
    STAGING = 'staging'
    PRODUCTION = 'production'


@dataclass(frozen=True)
class Config:
    # Environment
    environment: str = Environments.DEVELOPMENT.value

    # Supabase
    supabase_url: str = ''
    supabase_service_role_key: str = ''

    # Shopify
    webhook_secret_shopify: str = ''

    # Logs
    logs_dir: str = 'logs'

    @property
    def production(self) -> bool:
        return self.environment in ['production', 'prod']

    @classmethod
    def from_env(cls) -> 'Config':
        load_dotenv()
        return cls(
            environment=str(getenv('ENVIRONMENT', 'development')).lower(),
            # Se elimina el slash final para construir {url}/rest/v1/{tabla}
            supabase_url=str(getenv('SUPABASE_URL', '')).rstrip('/'),
            supabase_service_role_key=str(getenv('SUPABASE_SERVICE_ROLE_KEY', '')),
            webhook_secret_shopify=str(getenv('SHOPIFY_SECRET', '')),
            logs_dir=str(getenv('LOGS_DIR', 'logs')),
        )


config = Config.from_env()
