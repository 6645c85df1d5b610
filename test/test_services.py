#!/usr/bin/env python3
import json
import os
import sys
import unittest
from unittest.mock import Mock, patch

import requests

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from gotify_proxy.errors import DeliveryError, SerializationError
from gotify_proxy.models import GotifyMessage
from gotify_proxy.services import build_message_url, send_gotify_message


class TestSendGotifyMessage(unittest.TestCase):
    def setUp(self):
        self.message = GotifyMessage(title='[critical] HighCPU (FIRING)', message='CPU high\nCPU > 90%', priority=8)

    @patch('gotify_proxy.services.requests.post')
    def test_posts_json_with_token(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text='{}')

        status = send_gotify_message(self.message, 'http://gotify:8080', 'secret', timeout=3)

        self.assertEqual(status, 200)
        args, kwargs = mock_post.call_args
        self.assertEqual(args[0], 'http://gotify:8080/message')
        self.assertEqual(kwargs['params'], {'token': 'secret'})
        self.assertEqual(kwargs['headers']['Content-Type'], 'application/json')
        self.assertEqual(kwargs['timeout'], 3)
        self.assertEqual(json.loads(kwargs['data']), {
            'title': '[critical] HighCPU (FIRING)',
            'message': 'CPU high\nCPU > 90%',
            'priority': 8,
        })

    @patch('gotify_proxy.services.requests.post')
    def test_error_status_is_returned_not_raised(self, mock_post):
        mock_post.return_value = Mock(status_code=401, text='unauthorized')
        self.assertEqual(send_gotify_message(self.message, 'http://gotify', 'bad'), 401)

    @patch('gotify_proxy.services.requests.post')
    def test_transport_failures_become_delivery_error(self, mock_post):
        for exc in [requests.ConnectionError('refused'), requests.Timeout('slow'), requests.exceptions.InvalidURL('x')]:
            mock_post.side_effect = exc
            with self.assertRaises(DeliveryError) as ctx:
                send_gotify_message(self.message, 'http://gotify', 'secret')
            self.assertIs(ctx.exception.__cause__, exc)

    @patch('gotify_proxy.services.requests.post')
    def test_unserializable_message(self, mock_post):
        broken = GotifyMessage(title='t', message='m', priority=object())
        with self.assertRaises(SerializationError):
            send_gotify_message(broken, 'http://gotify', 'secret')
        mock_post.assert_not_called()

    @patch('gotify_proxy.services.requests.post')
    def test_lone_surrogate_is_escaped_in_body(self, mock_post):
        mock_post.return_value = Mock(status_code=200, text='{}')
        message = GotifyMessage(title='[unknown] \ud800 (FIRING)', message='x', priority=5)

        self.assertEqual(send_gotify_message(message, 'http://gotify', 'secret'), 200)

        body = mock_post.call_args.kwargs['data']
        body.decode('ascii')
        self.assertEqual(json.loads(body)['title'], '[unknown] \ud800 (FIRING)')

    def test_build_message_url(self):
        self.assertEqual(build_message_url('http://localhost:8080'), 'http://localhost:8080/message')
        self.assertEqual(build_message_url('http://localhost:8080/'), 'http://localhost:8080/message')


if __name__ == '__main__':
    unittest.main()
