"""A minimal HTTP server that answers every request with a fixed page."""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import ipaddress

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8081
GREETING = "hello world"


def make_response(body: str | bytes) -> bytes:
    """Build a complete HTTP/1.1 200 response carrying ``body``."""
    payload = body.encode("utf-8") if isinstance(body, str) else bytes(body)
    head = (
        "HTTP/1.1 200 OK\r\n"
        f"content-length: {len(payload)}\r\n"
        "connection: close\r\n"
        "\r\n"
    )
    return head.encode("ascii") + payload


class HttpServer:
    """Listens on an IPv4 address and port and greets every client."""

    def __init__(self, ip: str | ipaddress.IPv4Address, port: int) -> None:
        self.ip = ipaddress.IPv4Address(ip)
        if not 0 <= port <= 65535:
            raise ValueError(f"port out of range: {port}")
        self.port = port
        self._server: asyncio.AbstractServer | None = None

    @property
    def address(self) -> tuple[str, int]:
        """The bound (host, port); the port is real even when 0 was asked for."""
        if self._server is None or not self._server.sockets:
            raise RuntimeError("server is not started")
        host, port = self._server.sockets[0].getsockname()[:2]
        return host, port

    async def start(self) -> asyncio.AbstractServer:
        """Bind the listening socket and begin accepting connections."""
        if self._server is not None:
            raise RuntimeError("server already started")
        self._server = await asyncio.start_server(
            self._handle, str(self.ip), self.port
        )
        host, port = self.address
        print(f"Listening on http://{host}:{port}")
        return self._server

    async def run(self) -> None:
        """Serve until cancelled, starting the server first if needed."""
        if self._server is None:
            await self.start()
        assert self._server is not None
        await self._server.serve_forever()

    async def close(self) -> None:
        """Stop listening and wait for the socket to close."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()
        await server.wait_closed()

    async def _handle(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        try:
            await reader.readuntil(b"\r\n\r\n")
        except (asyncio.IncompleteReadError, asyncio.LimitOverrunError):
            writer.close()
            return
        try:
            writer.write(make_response(GREETING))
            await writer.drain()
        finally:
            writer.close()
            with contextlib.suppress(ConnectionError):
                await writer.wait_closed()


def _port(text: str) -> int:
    value = int(text)
    if not 0 <= value <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range: {value}")
    return value


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted."""
    parser = argparse.ArgumentParser(description="Serve a fixed greeting over HTTP.")
    parser.add_argument("--host", type=ipaddress.IPv4Address, default=DEFAULT_HOST)
    parser.add_argument("--port", type=_port, default=DEFAULT_PORT)
    args = parser.parse_args(argv)

    server = HttpServer(args.host, args.port)
    print("start")
    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        pass
    print("end")
    return 0