"""Amazon Bedrock embedding strategy."""

import json
from typing import Any

import boto3
import botocore.exceptions

from chunking_service.config.embedding.models import EmbeddingConfig
from chunking_service.config.settings import get_settings
from chunking_service.services.embedder.base import BaseEmbeddingStrategy


def _extract_embedding(payload: dict[str, Any]) -> list[float]:
    emb = payload.get("embedding")
    if emb is None:
        # Titan V2 can return embeddingsByType
        by_type = payload.get("embeddingsByType") or {}
        emb = by_type.get("float") or (next(iter(by_type.values()), None) if by_type else None)
    if not emb:
        raise ValueError("Bedrock response contained no embedding")
    return [float(x) for x in emb]


class BedrockEmbeddingStrategy(BaseEmbeddingStrategy):
    """
    Amazon Bedrock embeddings (Titan text embedding models). Bedrock embeds one text per
    invoke_model call. Uses IAM credentials; region from config.region or settings.aws_region.
    """

    @property
    def strategy_name(self) -> str:
        return "bedrock"

    def embed(self, texts: list[str], config: EmbeddingConfig) -> list[list[float]]:
        if not texts:
            return []
        region = config.region or get_settings().aws_region or None
        client = boto3.client("bedrock-runtime", region_name=region)
        results: list[list[float]] = []
        for text in texts:
            try:
                response = client.invoke_model(
                    modelId=config.model,
                    contentType="application/json",
                    accept="application/json",
                    body=json.dumps({"inputText": text}),
                )
            except botocore.exceptions.ClientError as e:
                raise ValueError(f"Bedrock invoke_model failed: {e}") from e
            payload = json.loads(response["body"].read().decode("utf-8"))
            results.append(_extract_embedding(payload))
        return results
