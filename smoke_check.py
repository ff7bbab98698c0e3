#!/usr/bin/env python3
"""
Portfolio Site Smoke Check

Checks a running instance end to end:
1. Health endpoint
2. Index page
3. One page per section, found through /api/links
4. JSON error for a missing page

Usage:
  python smoke_check.py --url http://localhost:9090
"""

import os
import sys
import argparse
import requests
from dotenv import load_dotenv

load_dotenv('.flaskenv')

SITE_URL = os.getenv('SITE_URL', f"http://localhost:{os.getenv('SERVICE_PORT', '9090')}")


def check_health(base_url):
    """Check the service is running."""
    print("\n🔍 Checking service health...")
    try:
        response = requests.get(f"{base_url}/health", timeout=5)
        if response.status_code == 200:
            print(f"✅ {response.json().get('service')} service is running")
            return True
        else:
            print(f"❌ Service returned {response.status_code}")
            return False
    except requests.RequestException as e:
        print(f"❌ Cannot connect to service: {e}")
        return False


def check_index(base_url):
    """Check the index page renders."""
    print("\n🏠 Fetching index page...")
    try:
        response = requests.get(f"{base_url}/", timeout=10)
        if response.status_code == 200 and '<html' in response.text:
            print(f"✅ Index page rendered ({len(response.text)} bytes)")
            return True
        else:
            print(f"❌ Index page returned {response.status_code}")
            return False
    except requests.RequestException as e:
        print(f"❌ Error fetching index page: {e}")
        return False


def check_sections(base_url):
    """Fetch the first linked page of every section."""
    print("\n🧭 Fetching one page per section...")
    results = {}

    for section in ('main', 'footer', 'article'):
        try:
            response = requests.get(f"{base_url}/api/links", params={'type': section}, timeout=10)
            links = response.json().get('links', []) if response.status_code == 200 else []
            if not links:
                print(f"⚠️  No {section} links")
                results[section] = None
                continue

            url = links[0]['url']
            page = requests.get(f"{base_url}{url}", timeout=10)
            ok = page.status_code == 200
            print(f"{'✅' if ok else '❌'} {url} -> {page.status_code}")
            results[section] = ok
        except requests.RequestException as e:
            print(f"❌ Error fetching {section} pages: {e}")
            results[section] = False

    return results


def check_missing_page(base_url):
    """A missing page must give a JSON 404."""
    print("\n🚫 Requesting a missing page...")
    try:
        response = requests.get(f"{base_url}/api/pages/main/does-not-exist", timeout=10)
        if response.status_code == 404 and 'error' in response.json():
            print("✅ Missing page answered with 404")
            return True
        else:
            print(f"❌ Missing page returned {response.status_code}")
            return False
    except (requests.RequestException, ValueError) as e:
        print(f"❌ Error requesting missing page: {e}")
        return False


def main():
    parser = argparse.ArgumentParser(description='Smoke check a running portfolio site')
    parser.add_argument('--url', type=str, default=SITE_URL, help='Base URL of the site')

    args = parser.parse_args()
    base_url = args.url.rstrip('/')

    print("=" * 80)
    print("PORTFOLIO SITE SMOKE CHECK")
    print("=" * 80)
    print(f"\nSite URL: {base_url}")

    if not check_health(base_url):
        print("\n❌ Service not ready. Start it first:")
        print("   python run.py")
        sys.exit(1)

    index_ok = check_index(base_url)
    sections = check_sections(base_url)
    missing_ok = check_missing_page(base_url)

    print("\n" + "=" * 80)
    print("SUMMARY")
    print("=" * 80)
    print(f"Index page: {'Success' if index_ok else 'Failed'}")
    for section, ok in sections.items():
        print(f"{section.capitalize()} page: {'Skipped' if ok is None else 'Success' if ok else 'Failed'}")
    print(f"Missing page: {'Success' if missing_ok else 'Failed'}")
    print("=" * 80)

    failed = not index_ok or not missing_ok or any(ok is False for ok in sections.values())
    sys.exit(1 if failed else 0)


if __name__ == '__main__':
    main()
