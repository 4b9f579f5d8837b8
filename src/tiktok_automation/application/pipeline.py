"""
Short video pipeline – single responsibility: script → review → speech → raw video → merge → final review → save.
Depends only on port interfaces (SOLID – Dependency Inversion).

Quality gates loop back instead of failing: a weak script is regenerated,
a rejected voiceover is re-synthesized, and a rejected final video restarts
the whole run. None of these loops are bounded.
"""

from datetime import datetime
from typing import Callable, Optional

from tiktok_automation.domain.errors import CollaboratorError, EmptyResultError, StageFailure
from tiktok_automation.domain.models import Run, Stage, Verdict
from tiktok_automation.domain.quality import score_gate, suggestion_gate
from tiktok_automation.ports.interfaces import (
    IAssetStore,
    IMediaMerger,
    ISpeechSynthesizer,
    ITextGenerator,
)

DEFAULT_TOPIC = "artificial intelligence"

SCRIPT_PROMPT = (
    "Write a 60-second TikTok script that hooks viewers in the first 3 seconds "
    "and tells a compelling, shareable story about {topic}."
)
SCRIPT_REVIEW_PROMPT = (
    "Evaluate the following TikTok script for virality: {script}. "
    "Score 1-10 and suggest improvements if under 8."
)
SPEECH_REVIEW_PROMPT = (
    "Transcribe and check clarity of this voiceover. Return 'OK' or suggest fixes: {audio}"
)
FINAL_REVIEW_PROMPT = (
    "Assess the final video here: {video}. Check audio levels, pacing, "
    "and suggest if it meets TikTok viral standards."
)

# (temperature, maxOutputTokens) per text stage
GENERATION_SETTINGS = {
    Stage.GENERATE_SCRIPT: (0.8, 250),
    Stage.EVALUATE_SCRIPT: (0.5, 150),
    Stage.EVALUATE_SPEECH: (0.0, 100),
    Stage.EVALUATE_FINAL: (0.5, 200),
}


def output_file_name(moment: datetime) -> str:
    """tiktok_<YYYYMMDD_HHMMSS>.mp4"""
    return f"tiktok_{moment.strftime('%Y%m%d_%H%M%S')}.mp4"


class ShortVideoPipeline:
    """
    Orchestrates one run of the TikTok video pipeline.
    All dependencies are injected (ports); no concrete implementations here.
    """

    def __init__(
        self,
        *,
        text_generator: ITextGenerator,
        evaluator: ITextGenerator,
        speech_synthesizer: ISpeechSynthesizer,
        asset_store: IAssetStore,
        media_merger: IMediaMerger,
        raw_video_id: str,
        output_folder_id: str,
        topic: str = DEFAULT_TOPIC,
        evaluate_speech: bool = False,
        script_gate: Callable[[str], Verdict] = score_gate,
        review_gate: Callable[[str], Verdict] = suggestion_gate,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._writer = text_generator
        self._evaluator = evaluator
        self._tts = speech_synthesizer
        self._store = asset_store
        self._merger = media_merger
        self._raw_video_id = raw_video_id
        self._output_folder_id = output_folder_id
        self._topic = topic
        self._evaluate_speech = evaluate_speech
        self._script_gate = script_gate
        self._review_gate = review_gate
        self._clock = clock

    def run(self, topic: Optional[str] = None) -> Run:
        """
        Drive one run to completion. Returns the finished Run;
        raises StageFailure as soon as any collaborator call fails.
        """
        run = Run(topic=topic or self._topic)
        print("=" * 60)
        print(f"🎬 Creating TikTok video about: {run.topic}")
        print("=" * 60)

        while self.attempt(run) is Verdict.NEEDS_REWORK:
            run.restarts += 1
            print("❌ Final quality issues detected, restarting entire flow...")
            run.discard_artifacts()

        print(f"\n🎉 Video creation completed! Saved as: {run.stored_name}")
        return run

    def attempt(self, run: Run) -> Verdict:
        """
        One pass from script generation to the final gate.
        Returns NEEDS_REWORK when the final review rejects the video (nothing saved),
        PASS once the video is persisted.
        """
        self._produce_script(run)
        self._produce_speech(run)
        self._fetch_raw_video(run)
        self._merge_audio_video(run)
        if self._evaluate_final(run) is Verdict.NEEDS_REWORK:
            return Verdict.NEEDS_REWORK
        self._persist_output(run)
        return Verdict.PASS

    # ------------------------------------------------------------------
    # Gate loops
    # ------------------------------------------------------------------

    def _produce_script(self, run: Run) -> None:
        while True:
            self._generate_script(run)
            if self._evaluate_script(run) is Verdict.PASS:
                print("✅ Story quality approved, proceeding to TTS...")
                return
            print("❌ Score too low, regenerating story...")

    def _produce_speech(self, run: Run) -> None:
        while True:
            self._synthesize_speech(run)
            if not self._evaluate_speech:
                return
            if self._evaluate_speech_quality(run) is Verdict.PASS:
                print("✅ Audio quality approved, fetching video...")
                return
            print("❌ Audio quality issues detected, regenerating TTS...")

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------

    def _generate_script(self, run: Run) -> None:
        print("\n[1/6] 📝 Generating TikTok story...")
        run.script_attempts += 1
        run.script = self._ask(
            Stage.GENERATE_SCRIPT, self._writer, SCRIPT_PROMPT.format(topic=run.topic)
        )
        print(f"✅ Generated story ({len(run.script)} characters): {run.script[:100]}...")

    def _evaluate_script(self, run: Run) -> Verdict:
        print("\n[2/6] 🔍 Evaluating story quality...")
        return self._review(
            run,
            Stage.EVALUATE_SCRIPT,
            SCRIPT_REVIEW_PROMPT.format(script=run.script),
            self._script_gate,
        )

    def _synthesize_speech(self, run: Run) -> None:
        print("\n[3/6] 🎤 Converting text to speech...")
        run.audio = self._call(Stage.SYNTHESIZE_SPEECH, self._tts.synthesize, run.script)
        print(f"✅ TTS completed: {run.audio.describe()}")

    def _evaluate_speech_quality(self, run: Run) -> Verdict:
        print("\n[3.5/6] 🎧 Checking voiceover quality...")
        return self._review(
            run,
            Stage.EVALUATE_SPEECH,
            SPEECH_REVIEW_PROMPT.format(audio=run.audio.describe()),
            self._review_gate,
        )

    def _fetch_raw_video(self, run: Run) -> None:
        print("\n[4/6] 📹 Fetching raw video...")
        run.video = self._call(Stage.FETCH_RAW_VIDEO, self._store.fetch_video, self._raw_video_id)
        print(f"✅ Video fetched: {run.video.describe()}")

    def _merge_audio_video(self, run: Run) -> None:
        print("\n[5/6] 🔧 Merging audio and video...")
        run.merged = self._call(Stage.MERGE_AUDIO_VIDEO, self._merger.merge, run.audio, run.video, 0)
        print(f"✅ Audio/Video merge completed: {run.merged.describe()}")

    def _evaluate_final(self, run: Run) -> Verdict:
        print("\n[5.5/6] 🎯 Performing final quality assessment...")
        verdict = self._review(
            run,
            Stage.EVALUATE_FINAL,
            FINAL_REVIEW_PROMPT.format(video=run.merged.describe()),
            self._review_gate,
        )
        if verdict is Verdict.PASS:
            print("✅ Final quality approved, saving video...")
        return verdict

    def _persist_output(self, run: Run) -> None:
        print("\n[6/6] 💾 Saving final video...")
        run.output_name = output_file_name(self._clock())
        run.stored_name = self._call(
            Stage.PERSIST_OUTPUT,
            self._store.persist,
            run.merged,
            self._output_folder_id,
            run.output_name,
        )
        print(f"✅ Video saved successfully! File name: {run.stored_name}")
        print(f"📱 Ready for TikTok upload: {run.output_name}")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _review(self, run: Run, stage: Stage, prompt: str, gate: Callable[[str], Verdict]) -> Verdict:
        reply = self._ask(stage, self._evaluator, prompt)
        # Critique is kept for diagnostics only; it never feeds the next prompt
        run.critiques[stage.value] = reply
        print(f"✅ QA Response: {reply}")
        return gate(reply)

    def _ask(self, stage: Stage, generator: ITextGenerator, prompt: str) -> str:
        temperature, max_tokens = GENERATION_SETTINGS[stage]
        text = self._call(stage, generator.generate, prompt, temperature, max_tokens)
        if not text or not text.strip():
            error = EmptyResultError("empty text reply")
            raise self._failure(stage, error) from error
        return text

    def _call(self, stage: Stage, func, *args):
        try:
            return func(*args)
        except CollaboratorError as e:
            raise self._failure(stage, e) from e

    def _failure(self, stage: Stage, error: Exception) -> StageFailure:
        print(f"❌ {stage.value} failed: {error}")
        return StageFailure(stage, error)
