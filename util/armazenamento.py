"""Armazenamento das fotos de levantamento em um bucket S3-compatível (MinIO)."""

import logging
import os

import boto3
from botocore.exceptions import BotoCoreError, ClientError


logger = logging.getLogger(__name__)

_cliente = None
_buckets_verificados = set()


class ErroArmazenamento(Exception):
    pass


def bucket_fotos() -> str:
    return os.getenv("MINIO_BUCKET_FOTOS", "fotos")


def obter_cliente():
    global _cliente
    if _cliente is None:
        endpoint = os.getenv("MINIO_ENDPOINT", "http://localhost:9000")
        _cliente = boto3.client(
            "s3",
            endpoint_url=endpoint,
            aws_access_key_id=os.getenv("MINIO_ACCESS_KEY", "minioadmin"),
            aws_secret_access_key=os.getenv("MINIO_SECRET_KEY", "minioadmin"),
            region_name=os.getenv("MINIO_REGION", "us-east-1"),
        )
        logger.info("Cliente de armazenamento apontando para %s", endpoint)
    return _cliente


def definir_cliente(cliente):
    """Substitui o cliente S3 (ex.: um MagicMock nos testes)."""
    global _cliente
    _cliente = cliente
    _buckets_verificados.clear()


def garantir_bucket(bucket: str):
    if bucket in _buckets_verificados:
        return
    cliente = obter_cliente()
    try:
        cliente.head_bucket(Bucket=bucket)
    except ClientError as erro:
        codigo = str(erro.response.get("Error", {}).get("Code", ""))
        if codigo not in ("404", "NoSuchBucket", "NotFound"):
            raise ErroArmazenamento(f"Bucket {bucket} indisponível") from erro
        cliente.create_bucket(Bucket=bucket)
        logger.info("Bucket %s criado", bucket)
    _buckets_verificados.add(bucket)


def url_objeto(bucket: str, chave: str) -> str:
    base = os.getenv("MINIO_URL_PUBLICA") or os.getenv("MINIO_ENDPOINT", "http://localhost:9000")
    return f"{base.rstrip('/')}/{bucket}/{chave}"


def enviar_foto(chave: str, conteudo: bytes, tipo_conteudo: str) -> str:
    """Grava a foto e devolve a URL pela qual ela é servida."""
    bucket = bucket_fotos()
    try:
        garantir_bucket(bucket)
        obter_cliente().put_object(Bucket=bucket, Key=chave, Body=conteudo, ContentType=tipo_conteudo)
    except (ClientError, BotoCoreError) as erro:
        logger.error("Falha ao enviar %s para o bucket %s: %s", chave, bucket, erro)
        raise ErroArmazenamento("Não foi possível armazenar a foto") from erro
    return url_objeto(bucket, chave)
