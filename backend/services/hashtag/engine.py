# engine.py
# role: 해시태그 추출 엔진 진입점
# content: 일기 텍스트에서 주제/요약 해시태그 3~6개를 뽑는다 (감정 태그는 만들지 않음).
# 설명:
#  - AI 분석이 실패했을 때의 대체 경로이자, AI가 돌려준 키워드를 거르는 필터로도 쓰인다.
#  - 그래서 어떤 입력에도 예외를 던지지 않는다. 실패하면 빈 결과를 돌려주고 호출측이 기본 태그를 채운다.
#
# 데이터 처리 흐름 :
# 1) 언어 판별 -> 2) 후보 생성(토큰 + n-gram) -> 3) 점수화 -> 4) 정규화/필터 -> 5) 최종 선택 -> 6) 포맷

from typing import Iterable, List, Mapping, Optional, Union

from pydantic import ValidationError
from tabulate import tabulate

from backend.config import DEBUG, MIN_TEXT_LENGTH
from backend.services.hashtag.candidates import generate_candidates
from backend.services.hashtag.dictionaries import get_dictionary
from backend.services.hashtag.formatter import format_hashtag, strip_hashtag
from backend.services.hashtag.language import LATIN_RE, detect_language, has_hangul
from backend.services.hashtag.models import (
    SUPPORTED_LANGUAGES,
    Candidate,
    ExtractionOptions,
    ExtractionResult,
)
from backend.services.hashtag.normalizer import canonical_key, is_blocked, normalize_candidates, to_canonical
from backend.services.hashtag.scorer import score_candidates
from backend.services.hashtag.selector import clamp_bounds, select_final

# 짧은 입력/오류 시 돌려줄 기본 언어
DEFAULT_LANGUAGE = "en"


def _coerce_options(options: Union[ExtractionOptions, Mapping, None]) -> ExtractionOptions:
    if isinstance(options, ExtractionOptions):
        return options
    if isinstance(options, Mapping):
        try:
            return ExtractionOptions(**options)
        except (ValidationError, TypeError) as e:
            if DEBUG:
                print(f"[hashtag] 옵션 오류 -> 기본값 사용: {e}")
    return ExtractionOptions()


def _fallback_language(options: ExtractionOptions) -> str:
    if options.preferred_language in SUPPORTED_LANGUAGES:
        return options.preferred_language
    return DEFAULT_LANGUAGE


def _print_candidates(title: str, candidates: List[Candidate], limit: int = 15) -> None:
    table = [
        [c.text, c.category.value, round(c.score, 4), round(c.position, 2), c.frequency]
        for c in candidates[:limit]
    ]
    print(f"\n[hashtag] {title} (상위 {len(table)}/{len(candidates)}):")
    print(tabulate(table, headers=["Text", "Category", "Score", "Pos", "Freq"], tablefmt="fancy_grid"))


def _extract(text: str, options: ExtractionOptions) -> ExtractionResult:
    # 1) 언어 판별 + 언어별 사전
    language = detect_language(text, options.preferred_language)
    dictionary = get_dictionary(language)

    # 2) 후보 생성 (정제 -> 토큰화 -> n-gram)
    tokens = generate_candidates(text, language)

    # 3) 점수화 (중복 제거 + 점수 내림차순)
    scored = score_candidates(tokens, language)

    # 4) 차단어 제거 + 대표어 치환 + 카테고리 분류
    normalized = normalize_candidates(scored, dictionary)
    if DEBUG:
        print(f"[hashtag] lang={language} tokens={len(tokens)} scored={len(scored)} normalized={len(normalized)}")
        _print_candidates("정규화 후보", normalized)

    # 5) 최종 선택
    selected = select_final(
        normalized,
        min_tags=options.min_tags,
        max_tags=options.max_tags,
        force_event=options.force_event,
    )

    # 6) 포맷
    hashtags = [format_hashtag(c.text, language) for c in selected]
    if DEBUG:
        print(f"[hashtag] 선택: {hashtags}")
    return ExtractionResult(hashtags=hashtags, language=language)


def extract(text, options: Union[ExtractionOptions, Mapping, None] = None) -> ExtractionResult:
    """Extract topic hashtags from diary ``text``.

    Never raises. ``None``/non-string text and text shorter than five
    characters (after trimming) give an empty tag list.
    """
    opts = _coerce_options(options)

    if not isinstance(text, str) or len(text.strip()) < MIN_TEXT_LENGTH:
        return ExtractionResult(hashtags=[], language=_fallback_language(opts))

    try:
        return _extract(text, opts)
    except Exception as e:
        # 대체 경로가 두 번째 장애 지점이 되면 안 되므로 여기서 끊는다.
        if DEBUG:
            print(f"[hashtag] 추출 실패: {e} | 입력={text[:50]}")
        return ExtractionResult(hashtags=[], language=_fallback_language(opts))


def _matches_language(keyword: str, language: str) -> bool:
    # 한 기록 = 한 언어. 다른 언어 키워드는 버린다.
    if language == "ko":
        return has_hangul(keyword)
    return not has_hangul(keyword) and bool(LATIN_RE.search(keyword))


def sanitize_keywords(
    keywords: Optional[Iterable],
    preferred_language: Optional[str] = None,
    max_tags: int = 6,
) -> ExtractionResult:
    """Re-validate AI-returned keywords against the same rules as ``extract``.

    Emotion/generic/blocked words are dropped, aliases are folded onto their
    canonical form, duplicates and other-language keywords are removed, and
    the survivors are formatted as hashtags (input order kept).
    """
    fallback = preferred_language if preferred_language in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE
    try:
        if keywords is None or isinstance(keywords, (str, bytes)):
            return ExtractionResult(hashtags=[], language=fallback)

        raw = [strip_hashtag(k.strip()).strip() for k in keywords if isinstance(k, str)]
        raw = [k for k in raw if k]
        if not raw:
            return ExtractionResult(hashtags=[], language=fallback)

        language = detect_language(" ".join(raw), preferred_language)
        dictionary = get_dictionary(language)
        _, limit = clamp_bounds(0, max_tags)

        hashtags: List[str] = []
        seen = set()
        for keyword in raw:
            if len(hashtags) >= limit:
                break
            if not _matches_language(keyword, language) or is_blocked(keyword, dictionary):
                if DEBUG:
                    print(f"[hashtag] AI 키워드 제외: {keyword}")
                continue
            canonical = to_canonical(keyword, dictionary)
            if canonical != keyword and is_blocked(canonical, dictionary):
                continue
            key = canonical_key(canonical)
            if key in seen:
                continue
            seen.add(key)
            hashtags.append(format_hashtag(canonical, language))

        return ExtractionResult(hashtags=hashtags, language=language)
    except Exception as e:
        if DEBUG:
            print(f"[hashtag] 키워드 정리 실패: {e}")
        return ExtractionResult(hashtags=[], language=fallback)
