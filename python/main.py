import argparse
import sys
import os
import asyncio
import logging
import socket
import time
import requests

sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from translator.api_server import run_api_server
from translator.client import DEFAULT_API_URL, TranslationClient
from translator.config import load_provider_config
from translator.controller import TargetLanguageInputMode, TranslationController
from translator.form import TranslationForm

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(message)s')
logger = logging.getLogger("Main")


def get_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        s.bind(('', 0))
        return s.getsockname()[1]


def wait_for_api_server(base_url, timeout=10):
    url = f"{base_url.rstrip('/')}/health"
    start = time.time()
    while time.time() - start < timeout:
        try:
            resp = requests.get(url, timeout=1)
            if resp.status_code == 200:
                return True
        except requests.RequestException:
            time.sleep(0.5)
    return False


def cmd_serve(args):
    port = args.port
    if not port or port <= 0:
        port = get_free_port()
    logger.info(f"Allocated Proxy Port: {port}")

    config = load_provider_config(args.config)
    run_api_server(host=args.host, port=port, config=config)
    return 0


def cmd_languages(args):
    form = TranslationForm(TranslationController(client=None))
    for title, options in form.language_options():
        print(title)
        for code, name in options:
            print(f"  {code:<4} {name}")
    return 0


async def _translate_once(form: TranslationForm):
    accepted = await form.click_translate()
    if not accepted:
        # 버튼 비활성 상태와 동일한 조건 (빈 입력 등)
        form.controller.begin_submit()
    print(form.render())
    return 1 if form.controller.state.error else 0


def cmd_translate(args):
    if not wait_for_api_server(args.api_url, timeout=args.wait):
        logger.error(f"Translation proxy not reachable at {args.api_url}")
        return 2

    mode = TargetLanguageInputMode.FREE_TEXT if args.free_text else TargetLanguageInputMode.CONSTRAINED
    controller = TranslationController(
        client=TranslationClient(args.api_url),
        target_language_input_mode=mode,
    )
    form = TranslationForm(controller)
    form.select_source(args.source)
    form.enter_target(args.target)
    form.type_text(args.text)

    return asyncio.run(_translate_once(form))


def build_parser():
    parser = argparse.ArgumentParser(description="LLM-backed translation proxy")
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Run the translation proxy server")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=3000)
    serve.add_argument("--config", default=None, help="Path to config.json")
    serve.set_defaults(func=cmd_serve)

    translate = sub.add_parser("translate", help="Translate text through a running proxy")
    translate.add_argument("text")
    translate.add_argument("--source", default="en")
    translate.add_argument("--target", required=True)
    translate.add_argument("--api-url", default=DEFAULT_API_URL)
    translate.add_argument("--free-text", action="store_true",
                           help="Accept any target language label instead of a registry code")
    translate.add_argument("--wait", type=float, default=5.0)
    translate.set_defaults(func=cmd_translate)

    languages = sub.add_parser("languages", help="List supported languages")
    languages.set_defaults(func=cmd_languages)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except KeyboardInterrupt:
        logger.info("User interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
