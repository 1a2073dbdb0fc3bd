"""Pytest fixtures for blobpy tests."""
import asyncio
import json
import os
import tempfile
from pathlib import Path

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer


CID_V0 = 'QmUNLLsPACCz1vLxQVkXqqLX5R1X345qqfHbsf67hvA3Nn'
CID_V0_ALT = 'QmYwAPJzv5CZsnA625s3Xf2nemtYgPpHdWEz79ojWnPbdG'
CID_V1 = 'bafybeigdyrzt5sfp7udm7hu76uh7y26nf3efuylqabf3oclgtqy55fbzdi'


class FakeAddNode:
    """
    In-process stand-in for the service's ``add`` endpoint.
    
    Records every request (query and multipart parts) and answers with one
    JSON line per received part, unless ``body`` or ``status`` say otherwise.
    """
    
    def __init__(self):
        self.requests = []
        self.status = 200
        self.reason = None
        self.body = None
        self.delay = 0.0
        self.endpoint = None
    
    async def handle_add(self, request: web.Request) -> web.Response:
        parts = []
        reader = await request.multipart()
        async for part in reader:
            parts.append({
                'name': part.name,
                'filename': part.filename,
                'headers': part.headers,
                'data': bytes(await part.read()),
            })
        self.requests.append({
            'method': request.method,
            'query': dict(request.query),
            'parts': parts,
        })
        
        if self.delay:
            await asyncio.sleep(self.delay)
        
        if self.status != 200:
            return web.Response(status=self.status, reason=self.reason, text='add failed')
        
        if self.body is not None:
            text = self.body
        else:
            cids = [CID_V0, CID_V0_ALT]
            text = ''.join(
                json.dumps({
                    'Name': part['filename'],
                    'Hash': cids[i % len(cids)],
                    'Size': str(len(part['data'])),
                }) + '\n'
                for i, part in enumerate(parts)
            )
        return web.Response(text=text, content_type='application/json')


@pytest_asyncio.fixture
async def fake_node():
    """Starts a FakeAddNode on a local port."""
    node = FakeAddNode()
    app = web.Application()
    app.router.add_post('/api/v0/add', node.handle_add)
    server = TestServer(app)
    await server.start_server()
    node.endpoint = str(server.make_url('/api/v0/'))
    yield node
    await server.close()


@pytest.fixture
def temp_file():
    """Creates a temporary file with known content and mtime."""
    fd, path = tempfile.mkstemp(suffix='.txt')
    os.write(fd, b"0123456789ABCDEFGHIJ")  # 20 bytes
    os.close(fd)
    os.utime(path, ns=(1_701_532_800_123_000_000, 1_701_532_800_123_000_000))
    yield Path(path)
    os.unlink(path)


@pytest.fixture
def add_response():
    """Returns a typical add response with a progress record."""
    return (
        json.dumps({'Name': 'a.txt', 'Bytes': 42}) + '\n'
        + json.dumps({'Name': 'a.txt', 'Hash': CID_V0, 'Size': '42'}) + '\n'
        + json.dumps({'Name': 'b.txt', 'Hash': CID_V1, 'Size': '7'}) + '\n'
    )
