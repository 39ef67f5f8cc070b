"""Manual test client: post an image to a running Palette API and print the result."""

import argparse
import json
import sys
from pathlib import Path

import requests

API_URL = "http://localhost:3000/analyze"


def mask_key(key: str) -> str:
    """Show only the last three characters of a key."""
    return "*" * max(len(key) - 3, 0) + key[-3:]


def run_test(image_path: Path, api_key: str, api_url: str = API_URL, timeout: float = 30.0) -> int:
    """Send one analysis request and print the outcome. Returns an exit code."""
    if not image_path.is_file():
        print(f"❌ Image file not found: '{image_path.resolve()}'", file=sys.stderr)
        return 1

    print(f"🚀 Sending request to {api_url}...")
    print(f"   - Image: {image_path.name}")
    print(f"   - API key: {mask_key(api_key)}")

    try:
        with image_path.open("rb") as f:
            response = requests.post(
                api_url,
                files={"image": (image_path.name, f)},
                data={"key": api_key},
                timeout=timeout,
            )
    except requests.ConnectionError:
        print(f"\n❌ No response from server. Is it running at {api_url}?", file=sys.stderr)
        return 1
    except requests.RequestException as e:
        print(f"\n❌ Failed to send request: {e}", file=sys.stderr)
        return 1

    try:
        body = response.json()
    except ValueError:
        body = response.text

    if response.ok:
        print("\n✅ Request succeeded!")
        print(f"Status: {response.status_code}")
        print(json.dumps(body, indent=2, ensure_ascii=False))
        return 0

    print("\n❌ Request failed!", file=sys.stderr)
    print(f"Status: {response.status_code}", file=sys.stderr)
    print(f"Error: {body}", file=sys.stderr)
    return 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Post an image to the Palette API /analyze endpoint.")
    parser.add_argument("image", type=Path, help="path to the image file")
    parser.add_argument("key", help="API key expected by the server")
    parser.add_argument("--url", default=API_URL, help=f"analyze endpoint (default: {API_URL})")
    args = parser.parse_args(argv)
    return run_test(args.image, args.key, args.url)


if __name__ == "__main__":
    sys.exit(main())
