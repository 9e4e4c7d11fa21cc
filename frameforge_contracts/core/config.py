import os
from typing import Dict

from dotenv import load_dotenv
from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Configs(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=True, extra="ignore")

    # base
    ENV: str = "dev"
    PROJECT_NAME: str = "frameforge-shared-contracts"
    LOG_LEVEL: str = "INFO"

    PROJECT_ROOT: str = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
    ALEMBIC_INI: str = "alembic.ini"

    DB_ENGINE_MAPPER: Dict[str, str] = {
        "postgresql": "postgresql+psycopg2",
        "postgres": "postgresql+psycopg2",
    }

    # database
    DB: str = "postgresql"
    DB_USER: str = "frameforge"
    DB_PASSWORD: str = "frameforge"
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_NAME: str = "frameforge"
    DB_ECHO: bool = False

    DATABASE_URI_FORMAT: str = "{db_engine}://{user}:{password}@{host}:{port}/{database}"

    # Support both DATABASE_URL (from env) and DATABASE_URI (constructed)
    DATABASE_URL: str = ""

    # Live constraint tests only run when this is set
    TEST_DATABASE_URL: str = ""

    @computed_field
    @property
    def DB_ENGINE(self) -> str:
        return self.DB_ENGINE_MAPPER.get(self.DB, "postgresql+psycopg2")

    @computed_field
    @property
    def DATABASE_URI(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return self.DATABASE_URI_FORMAT.format(
            db_engine=self.DB_ENGINE,
            user=self.DB_USER,
            password=self.DB_PASSWORD,
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        )

    @computed_field
    @property
    def ALEMBIC_INI_PATH(self) -> str:
        if os.path.isabs(self.ALEMBIC_INI):
            return self.ALEMBIC_INI
        return os.path.join(self.PROJECT_ROOT, self.ALEMBIC_INI)


configs = Configs()
