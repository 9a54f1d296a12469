#!/usr/bin/env python3
"""memalloc 명령 - 대화형 시뮬레이터 또는 웹 서버 실행"""

import sys

USAGE = """사용법: memalloc [web [PORT]]

  (없음)      대화형 메모리 할당 시뮬레이터
  web [PORT]  웹 시뮬레이터 서버 (기본 포트 8000)
"""


def main(argv=None):
    """명령행 인자에 따라 대화형 모드 또는 웹 서버 실행

    Returns:
        종료 코드
    """
    args = sys.argv[1:] if argv is None else argv

    if args and args[0] in ("-h", "--help", "help"):
        print(USAGE)
        return 0

    if args and args[0] == "web":
        port = 8000
        if len(args) > 1:
            if not args[1].isdigit():
                print(f"❌ 잘못된 포트: {args[1]}\n\n{USAGE}")
                return 2
            port = int(args[1])
        from .web import run_server
        run_server(port=port)
        return 0

    if args:
        print(f"❌ 알 수 없는 명령: {args[0]}\n\n{USAGE}")
        return 2

    from .interactive import run_interactive
    run_interactive()
    return 0


if __name__ == "__main__":
    sys.exit(main())
