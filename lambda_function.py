"""AWS Lambda ハンドラ

かな→ローマ字変換のエントリーポイント。
"""

import json
import logging
from typing import Any, Dict

from romajify import ConversionRequest, RomanizeOptions, Scheme, convert

_LOGGER = logging.getLogger(__name__)


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda関数のエントリーポイント

    Args:
        event: API Gatewayからのイベント（bodyに入力JSON）
        context: Lambda実行コンテキスト

    Returns:
        API Gateway形式のレスポンス
    """
    try:
        # イベントボディのパース
        body = _parse_event_body(event)

        if not isinstance(body, dict):
            return _error_response(400, "リクエストはJSONオブジェクトで指定してください")

        # 必須パラメータの検証（空文字は許可）
        if "text" not in body:
            return _error_response(400, "必須パラメータが不足しています: text")

        text = body["text"]
        if not isinstance(text, str):
            return _error_response(400, "text は文字列で指定してください")

        # 表記法の解決
        scheme_name = body.get("scheme") or Scheme.HEPBURN.value
        try:
            scheme = Scheme(str(scheme_name).strip().lower())
        except ValueError:
            return _error_response(400, f"未対応の表記法です: {scheme_name}")

        # フラグは JSON の真偽値のみ受け付ける
        flags = {}
        for name in ("upcase", "traditional"):
            value = body.get(name, False)
            if not isinstance(value, bool):
                return _error_response(400, f"{name} は真偽値で指定してください")
            flags[name] = value

        options = RomanizeOptions(**flags)

        # 変換実行
        result = convert(ConversionRequest(text=text, scheme=scheme, options=options))

        return _success_response(result.to_dict())

    except json.JSONDecodeError:
        return _error_response(400, "無効なJSON形式です")
    except Exception as e:
        _LOGGER.exception("Unexpected error while handling %s", event)
        return _error_response(500, f"内部エラー: {str(e)}")


def _parse_event_body(event: Dict[str, Any]) -> Any:
    """イベントボディをパースする

    Args:
        event: Lambda イベント

    Returns:
        パースされたボディ
    """
    # API Gateway経由の場合
    if "body" in event:
        body = event["body"]
        if isinstance(body, str):
            return json.loads(body)
        return body

    # 直接呼び出しの場合
    return event


def _success_response(data: Dict[str, Any]) -> Dict[str, Any]:
    """成功レスポンスを生成

    Args:
        data: レスポンスデータ

    Returns:
        API Gateway形式のレスポンス
    """
    return {
        "statusCode": 200,
        "headers": {
            "Content-Type": "application/json; charset=utf-8",
        },
        "body": json.dumps(data, ensure_ascii=False),
    }


def _error_response(status_code: int, message: str) -> Dict[str, Any]:
    """エラーレスポンスを生成

    Args:
        status_code: HTTPステータスコード
        message: エラーメッセージ

    Returns:
        API Gateway形式のレスポンス
    """
    return {
        "statusCode": status_code,
        "headers": {
            "Content-Type": "application/json; charset=utf-8",
        },
        "body": json.dumps({"error": message}, ensure_ascii=False),
    }


# ローカルテスト用
if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    test_event = {
        "text": "まっちゃ",
        "scheme": "hepburn",
    }
    result = lambda_handler(test_event, None)
    print(json.dumps(json.loads(result["body"]), indent=2, ensure_ascii=False))
