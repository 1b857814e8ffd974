"""
tg_search_web 命令行入口

支持通过 `python -m tg_search_web` 运行

子命令：
- serve: 启动 Mock API 服务器
- fetch: 通过 ApiClient 请求一次接口并输出归一化结果
"""

import argparse
import asyncio
import json
import sys

from tg_search_web.core.logger import setup_logger

logger = setup_logger()


def parse_args(argv=None):
    """解析命令行参数"""
    parser = argparse.ArgumentParser(
        prog="tg_search_web",
        description="Telegram search web front-end request layer and mock backend",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="启动 Mock API 服务器")
    serve.add_argument("--host", default="0.0.0.0", help="绑定地址 (默认: 0.0.0.0)")
    serve.add_argument("--port", type=int, default=5174, help="端口 (默认: 5174)")
    serve.add_argument("--reload", action="store_true", help="启用热重载（开发模式）")

    fetch = subparsers.add_parser("fetch", help="请求一次接口并输出 ApiResult")
    fetch.add_argument("path", help="请求路径或完整 URL，例如 /api/search")
    fetch.add_argument("--method", default="GET", help="HTTP 方法 (默认: GET)")
    fetch.add_argument("--query", action="append", default=[], metavar="KEY=VALUE", help="query 参数，可重复")
    fetch.add_argument("--data", default=None, help="JSON 请求体（非 GET 时发送）")
    fetch.add_argument("--base", default=None, help="覆盖配置中的 API 基础地址")

    return parser.parse_args(argv)


def _parse_query(pairs):
    query = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep:
            raise SystemExit(f"invalid --query value: {pair!r} (expected KEY=VALUE)")
        query[key] = value
    return query


def _parse_data(raw):
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError as e:
        raise SystemExit(f"invalid --data JSON: {e}") from e


def run_serve(host: str, port: int, reload: bool = False):
    """启动 Mock API 服务器"""
    import uvicorn

    uvicorn.run(
        "tg_search_web.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="info",
    )


async def run_fetch(args) -> int:
    """执行一次请求，结果通过 toast 队列上报并以 JSON 输出"""
    from tg_search_web.client import ApiClient, ClientConfig, RequestOptions
    from tg_search_web.services.toast_queue import ToastQueue

    config = ClientConfig.from_settings()
    if args.base:
        config = config.model_copy(update={"api_base": args.base})

    body = _parse_data(args.data)
    options = RequestOptions(method=args.method, body=body, query=_parse_query(args.query) or None)

    toasts = ToastQueue()

    def _log_latest(items):
        if items:
            latest = items[-1]
            log = logger.error if latest.type == "error" else logger.info
            log(f"[{latest.type}] {latest.text}")

    unsubscribe = toasts.subscribe(_log_latest)
    try:
        async with ApiClient(config) as client:
            result = await client.api_fetch(args.path, options)
        if result.ok:
            toasts.success(f"{options.method} {args.path} -> {result.status}")
        else:
            toasts.error(f"{options.method} {args.path} failed: {result.error}")
    finally:
        unsubscribe()
        toasts.clear()

    print(json.dumps(result.model_dump(), ensure_ascii=False, indent=2))
    return 0 if result.ok else 1


def main(argv=None):
    """命令行入口函数"""
    args = parse_args(argv)

    if args.command == "serve":
        print(f"Starting mock API server at http://{args.host}:{args.port} ...")
        print("API docs available at: /docs")
        run_serve(args.host, args.port, args.reload)
        return

    sys.exit(asyncio.run(run_fetch(args)))


if __name__ == "__main__":
    main()
