# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-14
# Description: EmbeddingModel
# -----------------------------------------------------------------------------
import logging
from typing import List, Protocol, Sequence, runtime_checkable

import numpy as np

from config.Config import Config
from utility.logging_utils import get_class_logger


@runtime_checkable
class EmbeddingModel(Protocol):
    def run(self, text: str, *, pooling: str = "mean", normalize: bool = True) -> Sequence[float]:
        ...


def l2_normalize(arr: np.ndarray) -> np.ndarray:
    norms = np.linalg.norm(arr, axis=-1, keepdims=True) + 1e-12
    return arr / norms


class SentenceTransformerEmbeddingModel:
    """
    Local sentence-transformers model (default: all-MiniLM-L6-v2, 384 dims).
    The weights are loaded in the constructor, which can take a while on first run.
    """

    SUPPORTED_POOLING = ("mean",)

    def __init__(
            self,
            model_name: str,
            *,
            device: str = "cpu",
            logger: logging.Logger | None = None,
    ):
        # Import here so the API can start without torch until the model is needed
        from sentence_transformers import SentenceTransformer

        self.model_name = model_name
        self.device = device
        self.logger = logger or get_class_logger(self.__class__)

        self.logger.info(
            "Loading local embedding model '%s' on %s (this may take a minute on first run)...",
            model_name,
            device,
        )
        self.model = SentenceTransformer(model_name, device=device)
        self.model.eval()
        self.dimension = self.model.get_sentence_embedding_dimension()

    def run(self, text: str, *, pooling: str = "mean", normalize: bool = True) -> List[float]:
        if pooling not in self.SUPPORTED_POOLING:
            raise ValueError(f"Unsupported pooling {pooling!r} for '{self.model_name}'")

        vec = self.model.encode(
            text,
            normalize_embeddings=normalize,
            convert_to_numpy=True,
            show_progress_bar=False,
        )
        return np.asarray(vec, dtype=np.float32).tolist()


class AzureOpenAIEmbeddingModel:
    """
    Azure OpenAI embeddings deployment. Pooling is done server-side, so only
    normalisation is applied locally.
    """

    def __init__(self, cfg: Config, *, logger: logging.Logger | None = None):
        from openai import AzureOpenAI

        self.cfg = cfg
        self.logger = logger or get_class_logger(self.__class__)

        self.client = AzureOpenAI(
            api_key=cfg.openai_azure_api_key,
            azure_endpoint=cfg.openai_azure_endpoint,
            api_version="2024-10-21",
        )
        self.model = cfg.openai_azure_embed_deployment or "text-embedding-3-large"
        self.model_name = self.model
        self.dimension = None
        self.logger.info("Azure OpenAI embedding model initialized '%s'", self.model)

    def run(self, text: str, *, pooling: str = "mean", normalize: bool = True) -> List[float]:
        resp = self.client.embeddings.create(model=self.model, input=[text])
        arr = np.asarray([d.embedding for d in resp.data], dtype=np.float32)

        # Normalize vectors (cosine-friendly)
        if normalize:
            arr = l2_normalize(arr)
        return arr[0].tolist()


def build_embedding_model(cfg: Config) -> EmbeddingModel:
    """Pick the embedding backend named by cfg.embedding_backend."""
    if cfg.embedding_backend == "azure":
        return AzureOpenAIEmbeddingModel(cfg)
    return SentenceTransformerEmbeddingModel(cfg.embedding_model_name, device=cfg.embedding_device)
