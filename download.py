import requests
import os
from errors import DownloadError
from indicators import load_config

HEADERS = {'User-Agent': 'Mozilla/5.0 (CensusMap; python-requests)'}


def _fetch(url, filename):
    r = requests.get(url, headers=HEADERS, stream=True, timeout=30)
    r.raise_for_status()
    with open(filename, 'wb') as f:
        for chunk in r.iter_content(chunk_size=8192):
            f.write(chunk)


def download_file(filename, urls):
    min_size = urls.get('min_size_bytes', 0)

    # 1. Keep a valid local copy, drop a truncated one
    if os.path.exists(filename):
        file_size = os.path.getsize(filename)
        if file_size >= min_size:
            print(f"✅ {filename} exists ({file_size / 1024:.1f} KB). Skipping.")
            return filename
        print(f"⚠️  {filename} is too small ({file_size} bytes). Deleting and re-downloading...")
        os.remove(filename)

    # 2. Primary, then backup
    sources = [('Primary', urls['primary'])]
    if urls.get('backup'):
        sources.append(('Backup', urls['backup']))

    errors = []
    for label, url in sources:
        print(f"⬇️  Downloading {filename} ({label} Source)...")
        try:
            _fetch(url, filename)
            if os.path.getsize(filename) < min_size:
                raise DownloadError(f"{filename} downloaded but is too small (API Error).")
            print(f"✅ Successfully saved {filename}.")
            return filename
        except (requests.RequestException, DownloadError) as e:
            print(f"❌ {label} source failed: {e}")
            errors.append(f"{label}: {e}")
            if os.path.exists(filename):
                os.remove(filename)

    raise DownloadError(f"Could not download {filename} ({'; '.join(errors)})")


def download_sources(config):
    for filename, url_set in config['sources'].items():
        download_file(filename, url_set)


if __name__ == "__main__":
    download_sources(load_config())
    print("\n🚀 Ready! Now run: python3 main.py")
