"""Async functional image listing operations."""

import io
import logging
from datetime import datetime
from typing import Iterable, TextIO

from .core.types import DisplayMode, EngineConfig, ImageListOptions, ImageRecord
from .listing.renderer import new_listing_table, render_images
from .operations.images import check_connectivity
from .operations.images import fetch_images as _fetch_images

logger = logging.getLogger(__name__)


def render_to_string(
    records: Iterable[ImageRecord],
    mode: DisplayMode,
    now: datetime | None = None,
) -> str:
    """Render records into the aligned listing text.

    Nothing is returned when a reference fails to parse; the error
    propagates instead.
    """
    buffer = io.StringIO()
    table = render_images(records, mode, new_listing_table(buffer, mode), now=now)
    if not mode.quiet:
        table.flush()
    return buffer.getvalue()


async def check_engine_connectivity(config: EngineConfig | None = None) -> bool:
    """컨테이너 엔진 연결 상태를 확인합니다.

    Args:
        config: 엔진 설정 (기본값: DOCKER_HOST 환경 변수 또는 로컬 소켓)

    Returns:
        bool: 엔진 접근 가능 시 True

    Examples:
        # 로컬 엔진 연결 확인
        accessible = await check_engine_connectivity()
    """
    return await check_connectivity(config or EngineConfig.from_env())


async def list_images(
    options: ImageListOptions | None = None,
    config: EngineConfig | None = None,
) -> list[ImageRecord]:
    """컨테이너 엔진의 이미지 목록을 조회합니다.

    Args:
        options: 엔진에 그대로 전달되는 조회 옵션
            - match_name: 저장소 이름 패턴 (예: "nginx")
            - all: 중간 이미지 포함 여부
            - filters: 필터 조건 (예: dangling=true)
        config: 엔진 설정 (기본값: DOCKER_HOST 환경 변수 또는 로컬 소켓)

    Returns:
        list[ImageRecord]: 엔진이 반환한 순서대로의 이미지 레코드 목록

    Raises:
        EngineConnectionError: 엔진에 연결할 수 없는 경우
        ImageListError: 엔진이 요청을 거부한 경우

    Examples:
        # 모든 이미지 조회
        records = await list_images()
        print(f"발견된 이미지: {len(records)}개")
    """
    return await _fetch_images(config or EngineConfig.from_env(), options)


async def images(
    mode: DisplayMode,
    stream: TextIO,
    match_name: str = "",
    config: EngineConfig | None = None,
    now: datetime | None = None,
) -> None:
    """이미지 목록을 조회하여 정렬된 표 형식으로 출력합니다.

    태그와 digest를 (저장소, 태그, digest) 행으로 펼치며, 태그와 digest가
    모두 없는 dangling 이미지는 한 번만 출력합니다. 모든 행은 버퍼에 모은 뒤
    한 번에 stream에 기록되므로, 오류가 발생하면 아무것도 출력되지 않습니다.

    Args:
        mode: 출력 모드 (quiet, show_all, no_trunc, show_digests, filters)
        stream: 출력 대상 (예: sys.stdout)
        match_name: 저장소 이름 패턴 (선택사항, 예: "library/foo")
        config: 엔진 설정 (기본값: DOCKER_HOST 환경 변수 또는 로컬 소켓)
        now: 경과 시간 계산 기준 시각 (기본값: 현재 UTC 시각)

    Raises:
        EngineConnectionError: 엔진에 연결할 수 없는 경우
        ImageListError: 엔진이 요청을 거부한 경우
        ReferenceParseError: 잘못된 태그 또는 digest 문자열이 있는 경우

    Examples:
        # 기본 목록 출력
        await images(DisplayMode(), sys.stdout)

        # digest 열 포함, ID 전체 출력
        await images(DisplayMode(show_digests=True, no_trunc=True), sys.stdout)

        # ID만 출력
        await images(DisplayMode(quiet=True), sys.stdout, match_name="nginx")
    """
    options = ImageListOptions.from_mode(mode, match_name)
    records = await list_images(options, config)
    logger.debug("Rendering %d images", len(records))

    output = render_to_string(records, mode, now=now)
    stream.write(output)
