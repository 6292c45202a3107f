import logging
import os
import queue
import select
import threading
import time
from enum import Enum
from typing import Callable, List, Optional, Tuple

log = logging.getLogger(__name__)

ESC = b"\x1b"
CTRL_C = b"\x03"
SEQUENCE_WAIT = 0.05
READ_SIZE = 64


class Event(Enum):
    TICK = "tick"
    QUIT = "quit"


class EventChannel:
    def __init__(self) -> None:
        self._queue: "queue.Queue[Event]" = queue.Queue()
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, event: Event) -> bool:
        if self._closed.is_set():
            return False
        self._queue.put(event)
        return True

    def poll(self) -> Optional[Event]:
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def drain(self) -> List[Event]:
        events = []
        while True:
            event = self.poll()
            if event is None:
                return events
            events.append(event)

    def close(self) -> None:
        self._closed.set()


def classify_key(seq: bytes) -> Optional[Event]:
    if seq in (ESC, CTRL_C):
        return Event.QUIT
    return None


def split_keys(data: bytes) -> Tuple[List[bytes], bytes]:
    keys = []
    i = 0
    end = len(data)
    while i < end:
        if data[i] != ESC[0]:
            keys.append(data[i:i + 1])
            i += 1
            continue
        if i + 1 == end:
            break
        nxt = data[i + 1]
        if nxt < 0x20:
            # ESC ESC, or ESC then a control key
            keys.append(ESC)
            i += 1
        elif nxt == ord("["):
            j = i + 2
            while j < end and 0x20 <= data[j] <= 0x3F:
                j += 1
            if j == end:
                break
            if 0x40 <= data[j] <= 0x7E:
                j += 1
            keys.append(data[i:j])
            i = j
        elif nxt == ord("O"):
            if i + 2 == end:
                break
            if data[i + 2] < 0x20:
                keys.append(data[i:i + 2])
                i += 2
            else:
                keys.append(data[i:i + 3])
                i += 3
        else:
            keys.append(data[i:i + 2])
            i += 2
    return keys, data[i:]


class InputListener:
    def __init__(self, channel: EventChannel, fd: Optional[int] = None) -> None:
        self.channel = channel
        self.fd = fd if fd is not None else 0
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._run, name="figtimer-input", daemon=True)
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def read_keys(self) -> Optional[List[bytes]]:
        data = os.read(self.fd, READ_SIZE)
        if not data:
            return None
        keys, pending = split_keys(data)
        while pending:
            ready, _, _ = select.select([self.fd], [], [], SEQUENCE_WAIT)
            more = os.read(self.fd, READ_SIZE) if ready else b""
            if not more:
                # a lone ESC, or a sequence cut short
                keys.append(pending)
                break
            found, pending = split_keys(pending + more)
            keys.extend(found)
        return keys

    def _run(self) -> None:
        while True:
            try:
                keys = self.read_keys()
            except OSError as exc:
                log.debug("input listener stopped: %s", exc)
                return
            if keys is None:
                log.debug("input listener reached end of input")
                return
            for key in keys:
                event = classify_key(key)
                if event is not None:
                    self.channel.send(event)


class TickGenerator:
    def __init__(
        self,
        channel: EventChannel,
        interval: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.channel = channel
        self.interval = interval
        self._sleep = sleep
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread and self._thread.is_alive():
            return
        self._thread = threading.Thread(target=self._run, name="figtimer-tick", daemon=True)
        self._thread.start()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while True:
            self._sleep(self.interval)
            if not self.channel.send(Event.TICK):
                log.debug("tick generator stopped, channel closed")
                return
