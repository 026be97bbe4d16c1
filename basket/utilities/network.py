import socket

"""Network helper utilities for Basket.

Share links are usually opened from a phone scanning a QR code, so the
startup banner prints the LAN address next to the localhost one.
"""


def get_local_ip() -> str:
    """Return a non-loopback local IP address if possible, otherwise '127.0.0.1'.

    A UDP socket is "connected" to a public address so the OS picks the
    outgoing interface; no packet is sent.
    """
    s = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        s.connect(("10.255.255.255", 1))
        ip = str(s.getsockname()[0])
    except OSError:
        ip = "127.0.0.1"
    finally:
        s.close()
    return ip


def build_urls(port: int) -> list[str]:
    """URLs the app is reachable at, localhost first."""
    urls = [f"http://localhost:{port}"]
    local_ip = get_local_ip()
    if local_ip not in ("127.0.0.1", "localhost"):
        urls.append(f"http://{local_ip}:{port}")
    return urls
