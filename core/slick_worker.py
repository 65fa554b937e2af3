# -*- coding: utf-8 -*-
"""JSON Slick 后台调度 — 单一常驻工作线程 + Future

模型:
    调用方 ──(Future, 参数)──▶ 收件队列 ──▶ 工作线程（逐条处理）
       ▲                                        │
       └──────── Future.set_result / set_exception ◀─┘

    - 工作线程首次使用时创建，进程内唯一，不主动销毁（daemon）
    - 队列先进先出，同一时刻只格式化一个请求，无需加锁
    - 每条消息自带 Future，响应与请求一一对应
    - 参数校验在工作线程内完成，调度层原样转发
"""

import asyncio
import logging
import queue
import threading
from concurrent.futures import Future

from .json_slick import UNSET, SlickTypeError, slick

logger = logging.getLogger(__name__)

WORKER_THREAD_NAME = "json-slick-worker"


class SlickWorker:
    """常驻格式化线程（actor）"""

    def __init__(self):
        self._inbox = queue.Queue()
        self._thread = threading.Thread(
            target=self._run, name=WORKER_THREAD_NAME, daemon=True)
        self._thread.start()
        logger.debug("started %s", WORKER_THREAD_NAME)

    @property
    def thread(self) -> threading.Thread:
        return self._thread

    def post(self, params: tuple) -> Future:
        fut = Future()
        self._inbox.put((fut, params))
        return fut

    def _run(self):
        while True:
            fut, params = self._inbox.get()
            # 仍在排队时被取消的请求直接跳过
            if not fut.set_running_or_notify_cancel():
                continue
            self._handle(fut, params)

    @staticmethod
    def _handle(fut: Future, params: tuple):
        json, tab, codes_line_length = params
        logger.debug("format request: %d chars",
                     len(json) if isinstance(json, str) else -1)
        try:
            result = slick(json, tab, codes_line_length)
        except SlickTypeError as e:
            logger.info("rejected: %s", e.result.splitlines()[-1])
            fut.set_exception(e)
        except Exception as e:
            logger.exception("unexpected failure in %s", WORKER_THREAD_NAME)
            fut.set_exception(e)
        else:
            fut.set_result(result)


_worker = None
_worker_lock = threading.Lock()


def get_worker() -> SlickWorker:
    """进程内唯一的工作线程，首次调用时创建"""
    global _worker
    if _worker is None:
        with _worker_lock:
            if _worker is None:
                _worker = SlickWorker()
    return _worker


def submit(json=UNSET, tab=UNSET, codes_line_length=UNSET) -> Future:
    """投递一次格式化请求，返回 concurrent.futures.Future。

    成功: future.result() → 格式化后的字符串
    失败: future.exception() → SlickTypeError（.result / .error）
    """
    return get_worker().post((json, tab, codes_line_length))


async def json_slick(json=UNSET, tab=UNSET, codes_line_length=UNSET) -> str:
    """异步格式化，等待期间不阻塞事件循环。

    Raises:
        SlickTypeError: 参数不合法
    """
    return await asyncio.wrap_future(submit(json, tab, codes_line_length))
