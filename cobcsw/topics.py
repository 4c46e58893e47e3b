"""Publish/subscribe topics, their buffers and the thread priorities."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

T = TypeVar("T")

EDU_POWER_MANAGEMENT_THREAD_PRIORITY = 500
EDU_COMMUNICATION_ERROR_THREAD_PRIORITY = 400
EDU_PROGRAM_QUEUE_THREAD_PRIORITY = 300
EDU_LISTENER_THREAD_PRIORITY = 100
EDU_HEARTBEAT_THREAD_PRIORITY = 100
COMMAND_PARSER_THREAD_PRIORITY = 100


class CommBuffer(Generic[T]):
    """Thread-safe holder of the most recently received value."""

    def __init__(self, default: T) -> None:
        self._value = default
        self._lock = threading.Lock()

    def put(self, value: T) -> None:
        with self._lock:
            self._value = value

    def get(self) -> T:
        with self._lock:
            return self._value


class Topic(Generic[T]):
    """A named channel that copies published values into subscribed buffers."""

    def __init__(self, topic_id: int, name: str) -> None:
        self.topic_id = topic_id
        self.name = name
        self._buffers: list[CommBuffer[Any]] = []
        self._lock = threading.Lock()

    def subscribe(self, buffer: CommBuffer[T]) -> CommBuffer[T]:
        """Deliver future publications to ``buffer``; return the buffer."""
        with self._lock:
            self._buffers.append(buffer)
        return buffer

    def publish(self, value: T) -> int:
        """Put ``value`` into every subscribed buffer; return how many got it."""
        with self._lock:
            buffers = list(self._buffers)
        for buffer in buffers:
            buffer.put(value)
        return len(buffers)


edu_is_alive_topic: Topic[bool] = Topic(-1, "eduIsAliveTopic")
edu_is_alive_buffer_for_power_management = edu_is_alive_topic.subscribe(CommBuffer(False))
edu_is_alive_buffer_for_communication_error = edu_is_alive_topic.subscribe(CommBuffer(False))
edu_is_alive_buffer_for_listener = edu_is_alive_topic.subscribe(CommBuffer(False))

next_program_start_delay_topic: Topic[int] = Topic(-1, "nextProgramStartDelayTopic")
next_program_start_delay_buffer = next_program_start_delay_topic.subscribe(CommBuffer(0))