# Copyright 2016 The xi-editor Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http:#www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import sys
import json
import threading
from collections import deque


class RpcError(Exception):
    """The other side broke the protocol."""


class RpcPeer(object):
    '''
    A JSON-lines RPC peer. Only one outgoing request is in flight at a
    time; callers on other threads wait on a lock. Incoming messages that
    arrive while a response is awaited are queued and handled right after
    the response has been read.

    A failed request (an error response, a response without a result, a
    closed or broken channel, or a response to some other request) yields
    None instead of raising. A broken channel or an out of step response
    also marks the peer done, so later requests fail at once.
    '''

    def __init__(self, handler, stdin=None, stdout=None):
        self.handler = handler
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.pending = deque()
        self.id_counter = 0
        self.done = False
        self._request_lock = threading.RLock()
        self._write_lock = threading.Lock()

    def mainloop(self, waiting_for=None):
        while not self.done:
            line = self.stdin.readline()
            if len(line) == 0:
                self.done = True
                return None
            if isinstance(line, bytes):
                line = line.decode('utf-8', errors='ignore')
            if not line.strip():
                continue
            try:
                data = json.loads(line)
            except ValueError:
                data = None
            if not isinstance(data, dict):
                # dictionaries sometimes print warnings on stdout
                print("ignoring unexpected line: {!r}".format(line.rstrip()),
                      file=sys.stderr, flush=True)
                continue
            # responses carry an id but no method
            if 'method' not in data:
                if data.get('id') != waiting_for:
                    raise RpcError('waiting for {}, got {}'.format(
                        waiting_for, data.get('id')))
                if 'error' in data:
                    print("rpc error for request {}: {}".format(waiting_for, data['error']),
                          file=sys.stderr, flush=True)
                    return None
                try:
                    return data['result']
                except KeyError as err:
                    print("key error in mainloop: {}".format(err),
                          file=sys.stderr, flush=True)
                    return None
            self.pending.append(data)
            if waiting_for is None:
                self.handle_pending()

    def handle_pending(self):
        while True:
            try:
                data = self.pending.popleft()
            except IndexError:
                return
            self.handle(data)

    def handle(self, data):
        req_id = data.get('id', None)
        method = data['method']
        params = data.get('params') or {}
        f = getattr(self.handler, method, None)
        if f is None:
            print("rpc handler has no method for {}".format(method),
                  file=sys.stderr, flush=True)
            if req_id is not None:
                self.send({'error': {'message': 'unknown method ' + method}, 'id': req_id})
            return

        try:
            result = f(self, **params)
        except Exception as err:
            if req_id is None:
                raise
            print("error handling {}: {}".format(method, err), file=sys.stderr, flush=True)
            self.send({'error': {'message': str(err)}, 'id': req_id})
            return

        if result is not None:
            if req_id is None:
                raise RpcError('unexpected return value on method ' + method)
            if hasattr(result, 'to_dict'):
                result = result.to_dict()
            resp = {'result': result, 'id': req_id}
            self.send(resp)
        elif req_id is not None:
            raise RpcError('expected return value for method: ' + method + ' id: ' + str(req_id))

    def send(self, data):
        with self._write_lock:
            self.stdout.write(json.dumps(data))
            self.stdout.write('\n')
            self.stdout.flush()

    def send_rpc(self, method, params, req_id=None):
        req = {'method': method, 'params': params}
        if req_id is not None:
            req['id'] = req_id
        self.send(req)

    def send_rpc_sync(self, method, params):
        with self._request_lock:
            if self.done:
                return None
            req_id = self.id_counter
            self.id_counter += 1
            try:
                self.send_rpc(method, params, req_id)
                result = self.mainloop(waiting_for=req_id)
            except (OSError, ValueError, RpcError) as err:
                print("rpc {} failed: {}".format(method, err), file=sys.stderr, flush=True)
                self.done = True
                return None
        self.handle_pending()
        return result

    def has_pending(self):
        return len(self.pending) != 0
