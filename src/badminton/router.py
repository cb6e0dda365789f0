import logging

from fastapi import APIRouter, Form, HTTPException, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from config import MAX_COURTS, MIN_COURTS, TEMPLATES_DIR
from badminton.exceptions import SchedulingError
from badminton.functions import generate_tournament
from badminton.models import TournamentSchedule
from badminton.parsing import build_config
from badminton.report import STATUS_LABELS, render_report, report_filename
from badminton.stats import (
    calculate_team_stats, ideal_matches_per_team, matchup_summary,
    scheduled_matches, total_matches,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/badminton', tags=['Badminton'])
templates = Jinja2Templates(directory=TEMPLATES_DIR)
# In-memory storage, lives as long as the process
tournaments_db: dict = {}


def _get_tournament(tid: str) -> TournamentSchedule:
    t = tournaments_db.get(tid)
    if not t:
        raise HTTPException(status_code=404, detail="Tournament not found")
    return t


def _generate(config, tid=None) -> TournamentSchedule:
    try:
        return generate_tournament(config, tid=tid)
    except SchedulingError as exc:
        logger.info("Generation rejected: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))


# Routes

@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", {
        "min_courts": MIN_COURTS,
        "max_courts": MAX_COURTS,
    })


@router.post("/tournament/create")
async def create_tournament(
    male_players: str = Form(""),
    female_players: str = Form(""),
    fixed_groups: str = Form(""),
    courts: str = Form(""),
    strategy: str = Form("targets"),
):
    config = build_config(male_players, female_players, fixed_groups, courts, strategy)
    t = _generate(config)
    tournaments_db[t.id] = t
    return RedirectResponse(f"/badminton/tournament/{t.id}", status_code=303)


@router.head("/tournament/{tid}")
async def tournament_head(tid: str):
    _get_tournament(tid)
    return Response(status_code=200)


@router.get("/tournament/{tid}", response_class=HTMLResponse)
async def tournament_view(request: Request, tid: str):
    t = _get_tournament(tid)
    return templates.TemplateResponse(request, "tournament.html", {
        "tournament": t,
        "team_stats": calculate_team_stats(t),
        "summary": matchup_summary(t),
        "total_matches": total_matches(t),
        "scheduled_matches": scheduled_matches(t),
        "ideal_per_team": ideal_matches_per_team(t),
        "status_labels": STATUS_LABELS,
    })


@router.post("/tournament/{tid}/regenerate")
async def regenerate_tournament(tid: str):
    t = _get_tournament(tid)
    tournaments_db[tid] = _generate(t.to_config(), tid=tid)
    return RedirectResponse(f"/badminton/tournament/{tid}", status_code=303)


@router.get("/tournament/{tid}/download")
async def download_tournament(tid: str):
    t = _get_tournament(tid)
    return PlainTextResponse(
        render_report(t),
        media_type="text/plain; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{report_filename(t)}"'},
    )


@router.post("/tournament/{tid}/delete")
async def delete_tournament(tid: str):
    tournaments_db.pop(tid, None)
    return RedirectResponse("/badminton/", status_code=303)
