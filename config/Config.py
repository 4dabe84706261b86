# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-08
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)

EMBEDDING_BACKENDS = ("local", "azure")


@dataclass(frozen=True)
class Config:
    # Embedding backend: "local" (sentence-transformers) or "azure" (Azure OpenAI)
    embedding_backend: str = "local"
    embedding_model_name: str = "sentence-transformers/all-MiniLM-L6-v2"
    embedding_device: str = "cpu"

    # Azure OpenAI (only when embedding_backend == "azure")
    openai_azure_api_key: str = ""
    openai_azure_endpoint: str = ""
    openai_azure_embed_deployment: str = ""

    # Chroma Vector Database (cloud when api key is set, local otherwise)
    chroma_api_key: str = ""
    chroma_tenant: str = ""
    chroma_database: str = ""
    chroma_path: str = "./chroma"
    collection_name: str = "cat-questions"

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        # Embeddings
        "embedding_backend": "QVS_EMBEDDING_BACKEND",
        "embedding_model_name": "QVS_EMBEDDING_MODEL",
        "embedding_device": "QVS_EMBEDDING_DEVICE",

        # Azure OpenAI
        "openai_azure_api_key": "AZURE_OPENAI_API_KEY",
        "openai_azure_endpoint": "AZURE_OPENAI_ENDPOINT",
        "openai_azure_embed_deployment": "AZURE_OPENAI_EMBED_DEPLOYMENT",

        # Chroma
        "chroma_api_key": "CHROMA_API_KEY",
        "chroma_tenant": "CHROMA_TENANT",
        "chroma_database": "CHROMA_DATABASE",
        "chroma_path": "QVS_CHROMA_PATH",
        "collection_name": "QVS_COLLECTION_NAME",
    }

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables; unset vars keep their defaults."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            if value:
                kwargs[field_name] = value
        return Config(**kwargs)

    def __post_init__(self):
        """
        Fail fast on settings that cannot work together.
        """
        if self.embedding_backend not in EMBEDDING_BACKENDS:
            raise ValueError(
                f"Unsupported embedding backend {self.embedding_backend!r}; "
                f"expected one of {EMBEDDING_BACKENDS}"
            )

        if self.embedding_backend == "azure":
            missing_fields = [
                f for f in ("openai_azure_api_key", "openai_azure_endpoint", "openai_azure_embed_deployment")
                if not getattr(self, f)
            ]
            if missing_fields:
                missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
                raise ValueError(f"Missing required environment variables: {missing_env_vars}")

        if self.chroma_api_key:
            missing_fields = [f for f in ("chroma_tenant", "chroma_database") if not getattr(self, f)]
            if missing_fields:
                missing_env_vars = [self.ENV_VARS[f] for f in missing_fields]
                raise ValueError(f"Missing required environment variables: {missing_env_vars}")

        if not self.collection_name:
            raise ValueError("collection_name must not be empty")

    @property
    def uses_chroma_cloud(self) -> bool:
        return bool(self.chroma_api_key)

    def summary(self) -> dict:
        """Return a safe, non-sensitive summary for logging."""
        return {
            "embedding_backend": self.embedding_backend,
            "embedding_model_name": self.embedding_model_name,
            "openai_azure_endpoint": self.openai_azure_endpoint,
            "openai_azure_embed_deployment": self.openai_azure_embed_deployment,
            "chroma_mode": "cloud" if self.uses_chroma_cloud else "local",
            "chroma_tenant": self.chroma_tenant,
            "chroma_database": self.chroma_database,
            "chroma_path": self.chroma_path,
            "collection_name": self.collection_name,
        }
