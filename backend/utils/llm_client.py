# llm_client.py
# role: LLM(OpenAI) 호출 모듈
# content: 일기 분석 프롬프트를 보내고, 응답 본문에서 JSON 객체만 꺼내서 dict로 돌려준다.
#  - 실패하면 예외 대신 None -> 호출측(diary_analysis)이 해시태그 엔진으로 대체한다.

import json
import os
import re
from typing import Optional

from openai import OpenAI

from backend.config import ANALYSIS_TIMEOUT, DEBUG, OPENAI_MODEL

# 응답에 설명 문장이 섞여 와도 첫 번째 { ... } 블록만 취한다.
_JSON_BLOCK_RE = re.compile(r"\{[\s\S]*\}")

_client: Optional[OpenAI] = None


def get_client() -> OpenAI:
    # 모듈 로드 시점이 아니라 첫 호출 때 만든다 (.env 로드 이후여야 키가 잡힘)
    global _client
    if _client is None:
        _client = OpenAI(api_key=os.getenv("OPENAI_API_KEY"), timeout=ANALYSIS_TIMEOUT)
    return _client


def parse_json_block(content: str) -> Optional[dict]:
    if not content:
        return None
    m = _JSON_BLOCK_RE.search(content)
    if not m:
        return None
    try:
        parsed = json.loads(m.group(0))
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def request_json(prompt: str, max_tokens: int = 256) -> Optional[dict]:
    """Send ``prompt`` and return the JSON object found in the reply, or None."""
    # 호출 시도(최대 2회: 최초 1회 + 실패 시 1회)
    for attempt in range(2):
        try:
            response = get_client().chat.completions.create(
                model=OPENAI_MODEL,
                messages=[{"role": "user", "content": prompt}],
                max_tokens=max_tokens,
                # 분류/추출 작업이므로 낮은 온도
                temperature=0.1,
            )
            content = response.choices[0].message.content or ""
            if DEBUG:
                print(f"[LLM] raw response: {content[:200]}")
            parsed = parse_json_block(content)
            if parsed is None and DEBUG:
                print("[LLM] 응답에서 JSON을 찾지 못했습니다.")
            return parsed
        except Exception as e:
            if DEBUG:
                print(f"[LLM] 호출 실패 (attempt {attempt + 1}): {e}")
    return None
