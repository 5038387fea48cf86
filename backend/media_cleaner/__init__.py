"""부모 게시물이 없는 미디어 첨부 파일을 정리하는 관리 도구 패키지입니다."""
