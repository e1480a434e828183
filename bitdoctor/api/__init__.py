"""bitdoctor API - commands following the 4-stage StageResult pattern."""
