"""Pytest configuration and shared fixtures."""

import json
import sys
from pathlib import Path
from typing import Any, Generator

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from sdk_offset_finder.infrastructure.logging import LoggerSetup

INPUT_ENV_VARS = ("SCHEMA_DIR", "SCHEMA_FILE", "HEADER_DUMP", "VERBOSE", "LOG_DIR", "NO_COLOR")

SAMPLE_HEADER_DUMP = """\
// Generated SDK dump
#pragma once
#include <cstdint>

struct CEntityIdentity;

enum class EntityFlags : uint32_t
{
    FL_ONGROUND = 0x1,
    FL_DUCKING = 0x2,
};

class CEntityInstance
{
public:
    char pad_0000[16]; // 0x0
    CEntityIdentity* m_pEntity; // 0x10
    static CEntityInstance& Get() { return *reinterpret_cast<CEntityInstance*>(0x1000); }
};

class C_BaseEntity : public CEntityInstance
{
public:
    int32_t m_iHealth; // 0x344
    uint8_t m_lifeState; // 0x348
    struct
    {
        uint8_t m_bDormant: 1;
        uint8_t m_bVisible: 1;
    };
    char m_szName[32]; // 0x350
    float m_flSpeed; // 0x10
};
"""


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Detach handlers installed by LoggerSetup between tests."""
    yield
    LoggerSetup.shutdown()


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear input selection variables and run from an empty directory (no .env)."""
    for name in INPUT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_header_dump() -> str:
    """Return a header dump exercising every region kind."""
    return SAMPLE_HEADER_DUMP


@pytest.fixture
def header_dump_file(tmp_path: Path, sample_header_dump: str) -> Path:
    """Write the sample header dump to disk."""
    path = tmp_path / "client.hpp"
    path.write_text(sample_header_dump, encoding="utf-8")
    return path


def _write_json(path: Path, document: Any) -> Path:
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def schema_dir(tmp_path: Path) -> Path:
    """Create a directory with two schema fragments."""
    directory = tmp_path / "schemas"
    directory.mkdir()
    _write_json(
        directory / "client.json",
        {
            "client.dll": {
                "classes": {
                    "C_BaseEntity": {
                        "fields": {"m_iHealth": 836, "m_iTeamNum": 995},
                        "metadata": [
                            {"type": "NetworkChangeCallback", "name": "m_iHealth"},
                            {"type": "NetworkVarNames", "name": "m_iHealth", "type_name": "int32"},
                        ],
                    }
                }
            }
        },
    )
    _write_json(
        directory / "server.json",
        {
            "server.dll": {
                "classes": {
                    "CBaseEntity": {
                        "fields": {"m_iHealth": 836},
                        "metadata": [
                            {"type": "NetworkVarNames", "name": "m_iHealth", "type_name": "int"},
                        ],
                    }
                }
            }
        },
    )
    (directory / "README.txt").write_text("not a schema", encoding="utf-8")
    return directory


@pytest.fixture
def schema_file(tmp_path: Path) -> Path:
    """Create a flat schema file."""
    return _write_json(
        tmp_path / "offsets.json",
        {
            "client.dll": {
                "C_BaseEntity": {
                    "m_iHealth": {"offset": 836, "type_": "int32"},
                    "m_pGameSceneNode": {"offset": 824, "type_": "CGameSceneNode*"},
                }
            }
        },
    )
