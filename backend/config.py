# config.py
# role: 환경변수 기반 설정값 모음
# content: 디버그 플래그, 사전 경로, 점수 가중치(휴리스틱 상수)를 한 곳에서 관리한다.
#  - .env는 main.py에서 load_dotenv()로 먼저 읽힌다.
#  - 가중치는 라벨링 데이터로 보정되기 전까지의 임시값이다. 코드에 리터럴로 박지 않고 여기서만 바꾼다.

import json
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

# 디버그 on/off (.env에서 DIARY_DEBUG=1 로 설정)
DEBUG = os.getenv("DIARY_DEBUG", "0") == "1"

# 해시태그 사전(JSON) 디렉터리. 미설정 시 패키지 내장 사전을 사용한다.
_DEFAULT_DICTIONARY_DIR = Path(__file__).parent / "services" / "hashtag" / "data"
DICTIONARY_DIR = Path(os.getenv("HASHTAG_DICTIONARY_DIR", str(_DEFAULT_DICTIONARY_DIR)))

# LLM 분석 설정
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
ANALYSIS_TIMEOUT = float(os.getenv("ANALYSIS_TIMEOUT", "20"))

# 호출측에서 잘라서 넘겨야 하는 최대 입력 길이
MAX_TRANSCRIPT_LENGTH = 10000
# 이보다 짧은 입력은 추출을 건너뛴다 (trim 기준)
MIN_TEXT_LENGTH = 5


class ScoringWeights(BaseModel):
    """Heuristic constants used by the scorer.

    None of these values were derived analytically; they were tuned by hand on a
    handful of diary entries and should be re-fit against labeled data.
    """

    edge_position_bonus: float = Field(1.2, description="Multiplier for candidates in the first/last edge of the text.")
    edge_ratio: float = Field(0.3, description="Fraction of the text treated as the lead (and, mirrored, the trail).")

    ko_length_min: int = Field(2, description="Shortest Korean candidate inside the ideal length band.")
    ko_length_max: int = Field(6, description="Longest Korean candidate inside the ideal length band.")
    ko_short_factor: float = Field(0.6, description="Multiplier for Korean candidates shorter than the band.")
    ko_compound_length: int = Field(3, description="Korean candidates longer than this count as compounds.")

    en_length_min: int = Field(4, description="Shortest English candidate inside the ideal length band.")
    en_length_max: int = Field(12, description="Longest English candidate inside the ideal length band.")
    en_short_factor: float = Field(0.7, description="Multiplier for English candidates shorter than the band.")
    en_compound_length: int = Field(8, description="English candidates longer than this count as compounds.")

    in_band_factor: float = Field(1.2, description="Multiplier for candidates inside the ideal length band.")
    long_factor: float = Field(0.8, description="Multiplier for candidates longer than the band.")
    specificity_bonus: float = Field(1.3, description="Multiplier for compound / phrase candidates.")


class SelectionPolicy(BaseModel):
    """Category balance rules for the selector."""

    max_event_tags: int = Field(2, description="Event tags taken before any other category.")
    force_event: bool = Field(True, description="Promote the top candidate to Event when no Event tag was picked.")


def load_scoring_weights(raw: Optional[str] = None) -> ScoringWeights:
    # HASHTAG_SCORING_OVERRIDES='{"edge_position_bonus": 1.1}' 형태의 JSON을 덮어쓴다.
    raw = os.getenv("HASHTAG_SCORING_OVERRIDES", "") if raw is None else raw
    raw = raw.strip()
    if not raw:
        return ScoringWeights()
    try:
        return ScoringWeights(**json.loads(raw))
    except (ValueError, TypeError, ValidationError) as e:
        # 잘못된 설정은 기본값으로 진행 (추출기가 설정 때문에 죽으면 안 된다)
        print(f"[config] WARN invalid HASHTAG_SCORING_OVERRIDES: {e}")
        return ScoringWeights()


SCORING_WEIGHTS = load_scoring_weights()
SELECTION_POLICY = SelectionPolicy()
