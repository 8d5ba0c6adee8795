"""메신저 봇용 GitHub 저장소 정보 / 가사 검색 명령 핸들러."""
