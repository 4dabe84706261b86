# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2025-11-16
# Description: ChromaQuestionVectorStore
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Sequence, Dict, Any, List, Optional

import chromadb
from chromadb import ClientAPI
from chromadb.api.models import Collection

from config.Config import Config
from embedding.VectorRecord import VectorRecord
from utility.logging_utils import get_class_logger
from vectorstore.QuestionVectorStore import QuestionVectorStore, StoreUnavailable


def build_chroma_client(cfg: Config) -> ClientAPI:
    """Chroma Cloud when an API key is configured, local persistent client otherwise."""
    if cfg.uses_chroma_cloud:
        return chromadb.CloudClient(
            tenant=cfg.chroma_tenant,
            database=cfg.chroma_database,
            api_key=cfg.chroma_api_key,
        )
    return chromadb.PersistentClient(path=cfg.chroma_path)


def to_chroma_where(filter: Optional[Dict[str, str]]) -> Optional[Dict[str, Any]]:
    """
    Equality dict -> Chroma where clause.
    Chroma only accepts one key per clause, so several keys go under $and.
    """
    if not filter:
        return None
    if len(filter) == 1:
        return dict(filter)
    return {"$and": [{key: value} for key, value in filter.items()]}


@dataclass
class ChromaQuestionVectorStore(QuestionVectorStore):
    cfg: Config
    client: Optional[ClientAPI] = None
    collection_name: str = ""
    logger: Any = None

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)
        self.collection_name = self.collection_name or self.cfg.collection_name

        if self.client is None:
            self.logger.info(
                "Initialising Chroma client (mode=%s, tenant=%s, database=%s, path=%s)",
                "cloud" if self.cfg.uses_chroma_cloud else "local",
                self.cfg.chroma_tenant,
                self.cfg.chroma_database,
                self.cfg.chroma_path,
            )
            self.client = build_chroma_client(self.cfg)

        # Vectors are always supplied by QuestionEmbedder, so no collection-side embedding function
        self.collection: Collection = self.client.get_or_create_collection(
            name=self.collection_name,
            metadata={"hnsw:space": "cosine"},
            embedding_function=None,
        )
        self.logger.info("Chroma collection ready: '%s'", self.collection_name)

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma and our collection?
        """
        try:
            _ = self.collection.count()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def count(self) -> int:
        try:
            return self.collection.count()
        except Exception as e:
            raise StoreUnavailable(f"Chroma count failed: {e}") from e

    def upsert(self, records: Sequence[VectorRecord]) -> None:
        if not records:
            return

        # Chroma rejects repeated ids within one call; last write wins
        latest: Dict[str, VectorRecord] = {}
        for rec in records:
            latest[rec.id] = rec

        if len(latest) < len(records):
            self.logger.warning(
                "Collapsed %d duplicate ids in upsert batch",
                len(records) - len(latest),
            )

        ids: List[str] = []
        embeddings: List[List[float]] = []
        metadatas: List[Dict[str, Any]] = []

        for rec in latest.values():
            ids.append(rec.id)
            embeddings.append(list(rec.values))
            metadatas.append(dict(rec.metadata))

        try:
            self.collection.upsert(
                ids=ids,
                embeddings=embeddings,
                metadatas=metadatas,
            )
        except Exception as e:
            self.logger.error(
                "Upsert of %d vectors into '%s' failed: %s",
                len(records),
                self.collection_name,
                e,
            )
            raise StoreUnavailable(f"Chroma upsert failed: {e}") from e

        self.logger.info(
            "Upserted %d vectors into Chroma collection '%s'",
            len(ids),
            self.collection_name,
        )

    def query(
            self,
            vector: Sequence[float],
            top_k: int = 10,
            filter: Dict[str, str] | None = None,
    ) -> List[Dict[str, Any]]:
        query_kwargs: Dict[str, Any] = {
            "query_embeddings": [list(vector)],
            "n_results": top_k,
            "include": ["metadatas", "distances"],
        }
        where = to_chroma_where(filter)
        if where is not None:
            self.logger.debug("Applying metadata filter (where=%s)", where)
            query_kwargs["where"] = where

        try:
            res = self.collection.query(**query_kwargs)
        except Exception as e:
            self.logger.error("Error during Chroma query: %s", e, exc_info=True)
            raise StoreUnavailable(f"Chroma query failed: {e}") from e

        matches = self.to_matches(res)
        self.logger.info(
            "Chroma search complete: returned %d results (requested %d)",
            len(matches),
            top_k,
        )
        return matches

    @staticmethod
    def to_matches(raw: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Chroma returns list-of-lists per query embedding; we only ever send one.
        Cosine distance is turned into a similarity score (higher is closer).
        """
        ids = raw.get("ids") or [[]]
        metas = raw.get("metadatas") or [[]]
        dists = raw.get("distances") or [[]]

        ids0 = ids[0] if ids else []
        metas0 = metas[0] if metas else []
        dists0 = dists[0] if dists else []

        matches: List[Dict[str, Any]] = []
        for i, match_id in enumerate(ids0):
            dist = dists0[i] if i < len(dists0) else None
            md = metas0[i] if i < len(metas0) else None
            matches.append({
                "id": match_id,
                "score": 1.0 - float(dist) if dist is not None else None,
                "metadata": dict(md) if md else {},
            })
        return matches
