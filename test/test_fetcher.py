import unittest

import aiohttp
from aiohttp import web
from aiohttp.test_utils import TestServer

from pages import NOT_FOUND_PAGE, profile_page

from overwatch_tracker.player.document import Locator
from overwatch_tracker.player.errors import FetchError
from overwatch_tracker.player.fetcher import HttpDocumentFetcher


async def broken_page(request: web.Request) -> web.Response:
    return web.Response(body=b"<html><body>\xff\xfe broken</body></html>",
                        headers={"Content-Type": "text/html; charset=utf-8"})


async def career_page(request: web.Request) -> web.Response:
    if request.match_info["handle"] == "Name-1234":
        return web.Response(text=profile_page(), content_type="text/html")
    return web.Response(text=NOT_FOUND_PAGE, status=404, content_type="text/html")


class TestHttpDocumentFetcher(unittest.IsolatedAsyncioTestCase):

    async def asyncSetUp(self):
        app = web.Application()
        app.router.add_get("/en-gb/career/pc/{region}/{handle}", career_page)
        app.router.add_get("/en-gb/career/psn/{handle}", broken_page)
        self.server = TestServer(app)
        await self.server.start_server()
        self.session = aiohttp.ClientSession()
        self.fetcher = HttpDocumentFetcher(self.session)

    async def asyncTearDown(self):
        await self.session.close()
        await self.server.close()

    async def test_profile_page(self):
        url = str(self.server.make_url("/en-gb/career/pc/eu/Name-1234"))
        result = await self.fetcher.fetch(url)

        self.assertTrue(result.ok)
        self.assertEqual(result.url, url)
        self.assertIsNotNone(result.document.find_optional(Locator.PORTRAIT))
        result.document.release()

    async def test_not_found_is_returned_not_raised(self):
        result = await self.fetcher.fetch(str(self.server.make_url("/en-gb/career/pc/eu/Other-1234")))

        self.assertEqual(result.status, 404)
        self.assertTrue(result.not_found)
        self.assertIsNone(result.document.find_optional(Locator.PORTRAIT))
        result.document.release()

    async def test_undecodable_page_is_still_parsed(self):
        result = await self.fetcher.fetch(str(self.server.make_url("/en-gb/career/psn/ConsoleGuy")))

        self.assertTrue(result.ok)
        self.assertIn("broken", result.document.soup.get_text())
        self.assertIsNone(result.document.find_optional(Locator.PORTRAIT))
        result.document.release()

    async def test_transport_error(self):
        url = str(self.server.make_url("/en-gb/career/pc/eu/Name-1234"))
        await self.server.close()

        with self.assertRaises(FetchError) as cm:
            await self.fetcher.fetch(url)
        self.assertEqual(cm.exception.url, url)


if __name__ == '__main__':
    unittest.main()
