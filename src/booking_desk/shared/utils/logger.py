import os
import sys

from aws_lambda_powertools import Logger

# 対話中の端末に INFO ログを流さない
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(service_name: str) -> Logger:
    # stdout はメニュー表示専用
    return Logger(
        service=service_name,
        stream=sys.stderr,
        level=os.getenv("POWERTOOLS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
